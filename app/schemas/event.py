from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Registration(BaseModel):
    id: int | str
    user_id: Optional[str] = None


class Event(BaseModel):
    id: int | str
    name: Optional[str] = None
    post_image: Optional[str] = None
    description: Optional[str] = None
    event_time: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[str] = None
    registrations: List[Registration] = Field(default_factory=list)

    @field_validator("registrations", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return value or []


class EventSummary(BaseModel):
    id: int | str
    name: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    eventTime: Optional[str] = None
    eventDate: Optional[str] = None
    imageUrl: Optional[str] = None
    createdAt: Optional[str] = None
    registrationCount: int = 0
    registeredUserIds: List[Optional[str]] = Field(default_factory=list)
