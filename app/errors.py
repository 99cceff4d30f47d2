class ContentError(Exception):
    """Base class for failures while loading MDX content."""


class FrontMatterError(ContentError):
    """The front matter block could not be parsed or has invalid field types."""


class ContentProcessingError(ContentError):
    """The document body could not be turned into a render tree."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class RemoteQueryError(Exception):
    """A Supabase query came back with an error instead of rows."""

    def __init__(self, table: str, error: Exception):
        self.table = table
        self.error = error
        super().__init__(f"Query on '{table}' failed: {error}")
