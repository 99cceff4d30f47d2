from fastapi import Depends

from app.db.supabase_client import create_supabase
from app.repos.events_repo import SupabaseEventsRepo
from app.services.content_parser import ContentParser
from app.services.content_serializer import ContentSerializer
from app.services.events_service import EventsService
from app.services.posts_service import PostsService
from app.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_content_parser():
    return ContentParser()


def get_content_serializer(current_settings: Settings = Depends(get_settings)):
    return ContentSerializer(theme=current_settings.CODE_THEME)


def get_posts_service(
    parser=Depends(get_content_parser),
    serializer=Depends(get_content_serializer),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(
        parser=parser, serializer=serializer, current_settings=current_settings
    )


def get_supabase(current_settings: Settings = Depends(get_settings)):
    return create_supabase(current_settings)


def get_events_repo(client=Depends(get_supabase)):
    return SupabaseEventsRepo(client)


def get_events_service(
    repo=Depends(get_events_repo),
    current_settings: Settings = Depends(get_settings),
):
    return EventsService(repo, current_settings=current_settings)
