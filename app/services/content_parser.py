import logging
import os
from pathlib import Path
from typing import List, Tuple

import frontmatter
import yaml
from pydantic import ValidationError

from app.errors import FrontMatterError
from app.schemas.post import FrontMatter

logger = logging.getLogger(__name__)

MDX_EXTENSION = ".mdx"


class ContentParser:
    def __init__(self, extension: str = MDX_EXTENSION):
        self.extension = extension

    def list_files(self, directory: Path) -> List[str]:
        """Names of content files directly inside `directory`, in listing order."""
        return [
            name
            for name in os.listdir(directory)
            if os.path.splitext(name)[1] == self.extension
        ]

    def read_file(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def parse(self, raw: str) -> Tuple[FrontMatter, str]:
        """Split raw file text into front matter and body."""
        try:
            parsed = frontmatter.loads(raw)
        except (yaml.YAMLError, ValueError) as e:
            # PyYAML builds timestamps while loading, so `2024-02-30` is a ValueError
            raise FrontMatterError(f"Malformed front matter: {e}") from e

        try:
            meta = FrontMatter.model_validate(parsed.metadata or {})
        except ValidationError as e:
            raise FrontMatterError(f"Invalid front matter fields: {e}") from e
        return meta, parsed.content
