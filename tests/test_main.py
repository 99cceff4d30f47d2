from fastapi.testclient import TestClient

from app import dependencies as deps
from app.main import app
from app.schemas.post import Post
from app.settings import Settings
from tests.conftest import FakePostsService, post_payload


def test_root_reports_missing_env_vars():
    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_settings] = lambda: Settings(
        SUPABASE_URL="", SUPABASE_ANON_KEY=""
    )
    try:
        with TestClient(app) as client:
            res = client.get("/")
            assert res.status_code == 200
            assert res.json()["message"] == "Environment variables missing"
            assert "required environment variables" in res.json()["detail"]
    finally:
        app.dependency_overrides = original_overrides


def test_root_reports_running_when_configured():
    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_settings] = lambda: Settings(
        SUPABASE_URL="https://proj.supabase.co", SUPABASE_ANON_KEY="anon"
    )
    try:
        with TestClient(app) as client:
            res = client.get("/")
            assert res.status_code == 200
            assert res.json() == {"message": "GDG site API is running"}
    finally:
        app.dependency_overrides = original_overrides


def test_content_routes_are_mounted():
    fake_post = Post(**post_payload())

    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_posts_service] = lambda: FakePostsService(
        list_posts_return=[fake_post]
    )
    try:
        with TestClient(app) as client:
            res = client.get("/blog")
            assert res.status_code == 200
            assert res.json() == [fake_post.model_dump()]

            res = client.get("/space")
            assert res.status_code == 200
    finally:
        app.dependency_overrides = original_overrides
