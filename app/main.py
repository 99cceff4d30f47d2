import logging

from fastapi import Depends, FastAPI

from app.dependencies import get_settings
from app.routers import events, posts
from app.settings import Settings, settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="GDG Site API", description="Blog, space and events content")

app.include_router(posts.router)
app.include_router(events.router)

if not settings.has_env_vars:
    logger.warning("Supabase environment variables missing, events routes disabled")


@app.get("/")
async def root(current_settings: Settings = Depends(get_settings)):
    if not current_settings.has_env_vars:
        return {
            "message": "Environment variables missing",
            "detail": "Please make sure to add the required environment variables to your project.",
        }
    return {"message": "GDG site API is running"}
