import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.event import EventSummary
from app.services.events_service import EventsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/events", response_model=List[EventSummary])
def list_events(service: EventsService = Depends(deps.get_events_service)):
    """Events with their registration counts and registered user ids."""
    try:
        return service.list_events()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing events: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve events")


@router.get("/blogs", response_model=Optional[List[dict]])
def list_blogs(service: EventsService = Depends(deps.get_events_service)):
    """Raw rows of the blogs table."""
    return service.list_blog_rows()
