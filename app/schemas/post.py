import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator
from pydantic.config import ConfigDict


class Category(str, Enum):
    BLOG = "blog"
    SPACE = "space"


class FrontMatter(BaseModel):
    """Known front matter keys of an MDX file. Unknown keys are kept as extras."""

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    author: Optional[str] = None
    image: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _convert_date(cls, value):
        # YAML turns bare dates into date/datetime objects
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value

    @field_validator("title", "description", "date", "author", "image", mode="before")
    @classmethod
    def _scalar_to_str(cls, value):
        # `title: 2024` or `description: yes` are plain text to the site
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        return value


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    author: str
    slug: str
    content: str  # serialized render tree, see ContentSerializer
    readingTime: str
    image: str
