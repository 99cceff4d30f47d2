import logging
import urllib.parse
from typing import Optional

from app.settings import settings

logger = logging.getLogger(__name__)


def public_asset_url(
    bucket: str, path: Optional[str], base_url: Optional[str] = None
) -> Optional[str]:
    """
    Public URL of a file in a Supabase storage bucket
    """
    if not path:
        return None
    base = (base_url or settings.storage_public_url).rstrip("/")
    return f"{base}/{bucket}/{urllib.parse.quote(path.lstrip('/'))}"


def process_frontmatter_image(image_path: Optional[str], default: str) -> str:
    """
    Image path from frontmatter, falling back to the site's default cover
    """
    if not image_path:
        logger.debug(f"No frontmatter image, using default {default}")
        return default
    return image_path
