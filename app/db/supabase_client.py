import logging
from typing import Any

import httpx
from fastapi import HTTPException
from postgrest.exceptions import APIError
from supabase import Client, create_client

from app.schemas.query import QueryResult
from app.settings import Settings, settings

logger = logging.getLogger(__name__)


def create_supabase(current_settings: Settings = settings) -> Client:
    """
    Create a Supabase client for the current request.
    Called at runtime to avoid import-time connections.
    """
    if not current_settings.has_env_vars:
        raise HTTPException(status_code=503, detail="Environment variables missing")
    return create_client(
        current_settings.SUPABASE_URL, current_settings.SUPABASE_ANON_KEY
    )


def run_query(table: str, query: Any) -> QueryResult:
    """Execute a postgrest query builder, capturing failures instead of raising."""
    try:
        response = query.execute()
    except (APIError, httpx.HTTPError) as e:
        logger.warning(f"Supabase query on '{table}' failed: {e}")
        return QueryResult(table=table, data=None, error=e)
    return QueryResult(table=table, data=response.data, error=None)
