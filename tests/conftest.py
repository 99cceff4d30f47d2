import textwrap
from pathlib import Path
from types import SimpleNamespace

from postgrest.exceptions import APIError


class FakeQuery:
    """
    Minimal postgrest query builder stand-in.
    Records the selected columns and returns preloaded rows on execute().
    """

    def __init__(self, rows=None, error: Exception | None = None):
        self.rows = rows
        self.error = error
        self.columns = None
        self.executed = False

    def select(self, *columns):
        self.columns = columns
        return self

    def execute(self):
        self.executed = True
        if self.error is not None:
            raise self.error
        return SimpleNamespace(data=self.rows, count=None)


class FakeSupabase:
    """
    Minimal Supabase client stand-in keyed by table name.
    """

    def __init__(self, tables: dict[str, FakeQuery]):
        self.tables = tables
        self.calls = []

    def table(self, name: str) -> FakeQuery:
        self.calls.append(name)
        return self.tables[name]


def api_error(message: str = "relation does not exist") -> APIError:
    return APIError({"message": message, "code": "42P01", "hint": None, "details": None})


class FakeEventsRepo:
    """
    Minimal repo stand-in used in events service tests.
    """

    def __init__(self, events_result, blogs_result=None):
        self.events_result = events_result
        self.blogs_result = blogs_result

    def list_events(self):
        return self.events_result

    def list_blogs(self):
        return self.blogs_result


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.get_post_calls = []

    async def get_blog_posts(self):
        return self._list_posts_return

    async def get_space_entries(self):
        return self._list_posts_return

    async def get_post(self, category, slug: str):
        self.get_post_calls.append((category, slug))
        return self._get_post_return


# --- Content helpers ---


def write_mdx(directory: Path, name: str, text: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


def post_payload(**overrides) -> dict:
    payload = {
        "title": "Hello",
        "description": "A post",
        "date": "2024-05-01",
        "author": "GDG Team member",
        "slug": "hello",
        "content": '{"compiledSource": "", "frontmatter": {}, "scope": {}}',
        "readingTime": "1 min read",
        "image": "/blog-images/default.jpg",
    }
    payload.update(overrides)
    return payload
