import asyncio
import datetime
import logging
import os
from pathlib import Path
from typing import List, Optional

from app.errors import ContentError
from app.schemas.post import Category, Post
from app.services.content_parser import ContentParser
from app.services.content_serializer import ContentSerializer
from app.services.image_service import process_frontmatter_image
from app.settings import Settings, settings
from app.utils import calculate_reading_time

logger = logging.getLogger(__name__)

EPOCH_MIN = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


class PostsService:
    def __init__(
        self,
        parser: ContentParser,
        serializer: ContentSerializer,
        current_settings: Settings = settings,
    ):
        self.parser = parser
        self.serializer = serializer
        self.settings = current_settings

    def category_dir(self, category: Category) -> Path:
        return Path(self.settings.CONTENT_DIR) / Category(category).value

    async def get_blog_posts(self) -> List[Post]:
        return await self.list_posts(Category.BLOG)

    async def get_space_entries(self) -> List[Post]:
        return await self.list_posts(Category.SPACE)

    async def list_posts(self, category: Category) -> List[Post]:
        category = Category(category)
        content_dir = self.category_dir(category)
        files = self.parser.list_files(content_dir)
        logger.debug(f"Loading {len(files)} {category.value} files from {content_dir}")

        # any failing file fails the whole listing
        posts = await asyncio.gather(
            *(self.read_post(content_dir / name) for name in files)
        )

        if category is Category.BLOG:
            return sorted(posts, key=_date_sort_key, reverse=True)
        return list(posts)

    async def get_post(self, category: Category, slug: str) -> Optional[Post]:
        category = Category(category)
        if not slug or os.path.basename(slug) != slug or slug.startswith("."):
            return None
        path = self.category_dir(category) / f"{slug}{self.parser.extension}"
        try:
            return await self.read_post(path)
        except Exception as e:
            logger.warning(f"Failed to load {category.value} post {slug}: {e}")
            return None

    async def read_post(self, path: Path) -> Post:
        raw = await asyncio.to_thread(self.parser.read_file, path)
        try:
            meta, body = self.parser.parse(raw)
            content = await self.serializer.serialize(body)
        except ContentError as e:
            logger.error(f"Failed to process {path}: {e}")
            raise

        return Post(
            title=meta.title,
            description=meta.description,
            date=meta.date,
            author=meta.author or self.settings.DEFAULT_AUTHOR,
            slug=_normalize_slug(path),
            content=content,
            readingTime=calculate_reading_time(body, self.settings.READING_WPM),
            image=process_frontmatter_image(meta.image, self.settings.DEFAULT_IMAGE),
        )


def _normalize_slug(path: Path) -> str:
    base, _ = os.path.splitext(os.path.basename(path))
    return base


def _parse_date(value: Optional[str]) -> Optional[datetime.datetime]:
    if not value:
        return None
    try:
        parsed = datetime.datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


def _date_sort_key(post: Post):
    # undated posts sort after every dated one when reversed
    parsed = _parse_date(post.date)
    if parsed is None:
        return (False, EPOCH_MIN)
    return (True, parsed)
