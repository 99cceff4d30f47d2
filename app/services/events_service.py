import datetime
import logging
from typing import List, Optional

from app.schemas.event import Event, EventSummary
from app.services.image_service import public_asset_url
from app.settings import Settings, settings

logger = logging.getLogger(__name__)


class EventsService:
    def __init__(self, repo, current_settings: Settings = settings):
        self.repo = repo
        self.settings = current_settings

    def list_events(self) -> List[EventSummary]:
        result = self.repo.list_events()
        if not result.ok:
            # the page shows an empty listing rather than an error
            logger.error(f"Could not load events, rendering none: {result.error}")

        events = [Event.model_validate(row) for row in result.rows()]
        return [self.summarize(event) for event in events]

    def list_blog_rows(self) -> Optional[List[dict]]:
        result = self.repo.list_blogs()
        if not result.ok:
            logger.error(f"Could not load blogs: {result.error}")
        return result.data

    def summarize(self, event: Event) -> EventSummary:
        return EventSummary(
            id=event.id,
            name=event.name,
            description=event.description,
            location=event.location,
            eventTime=event.event_time,
            eventDate=_event_date(event.event_time),
            imageUrl=public_asset_url(
                self.settings.EVENTS_BUCKET,
                event.post_image,
                base_url=self.settings.storage_public_url,
            ),
            createdAt=event.created_at,
            registrationCount=len(event.registrations),
            registeredUserIds=[reg.user_id for reg in event.registrations],
        )


def _event_date(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    try:
        return datetime.datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return None
