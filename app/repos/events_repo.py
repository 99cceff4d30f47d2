from app.db.supabase_client import run_query
from app.schemas.query import QueryResult

EVENTS_TABLE = "events"
BLOGS_TABLE = "blogs"

EVENT_COLUMNS = """
    id,
    name,
    post_image,
    description,
    event_time,
    location,
    created_at,
    registrations:registrations (id, user_id)
"""


class SupabaseEventsRepo:
    def __init__(self, client):
        self.client = client

    def list_events(self) -> QueryResult:
        query = self.client.table(EVENTS_TABLE).select(EVENT_COLUMNS)
        return run_query(EVENTS_TABLE, query)

    def list_blogs(self) -> QueryResult:
        query = self.client.table(BLOGS_TABLE).select("*")
        return run_query(BLOGS_TABLE, query)
