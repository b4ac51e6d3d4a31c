import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.database.supabase_client import get_supabase
from app.modules.auth.service import clear_auth_cache
from app.modules.availability import cache as availability_cache
from app.modules.notifications import hub
from app.modules.search import recent_searches
from tests.fakes import FakeSupabase

ALICE = "user-alice"
BOB = "user-bob"
CAROL = "user-carol"

BUCKET_URL = "https://test.supabase.co/storage/v1/object/public/projects"


def seed_tables():
    return {
        "profiles": [
            {"id": ALICE, "username": "alice", "full_name": "Alice Designer", "bio": "Brand and logo work",
             "location": "Berlin, Germany", "is_available": True, "followers_count": 12,
             "avatar_url": None, "created_at": "2026-01-01T00:00:00+00:00"},
            {"id": BOB, "username": "bob", "full_name": "Bob Shooter", "bio": "Street photographer",
             "location": "Lisbon, Portugal", "is_available": False, "followers_count": 3,
             "avatar_url": None, "created_at": "2026-02-01T00:00:00+00:00"},
            {"id": CAROL, "username": "carol", "full_name": None, "bio": None,
             "location": None, "is_available": True, "followers_count": 0,
             "avatar_url": None, "created_at": "2026-03-01T00:00:00+00:00"},
        ],
        "categories": [
            {"id": "cat-design", "name": "Graphic Design", "created_at": "2025-01-01T00:00:00+00:00"},
            {"id": "cat-photo", "name": "Photography", "created_at": "2025-01-02T00:00:00+00:00"},
            {"id": "cat-video", "name": "Edited Video", "created_at": "2025-01-03T00:00:00+00:00"},
            {"id": "cat-motion", "name": "Motion", "created_at": "2025-01-04T00:00:00+00:00"},
        ],
        "projects": [
            {"id": "p-logo", "user_id": ALICE, "title": "Logo", "description": "A minimal logo mark",
             "image_url": f"{BUCKET_URL}/alice/logo.png", "category_id": "cat-design",
             "likes_count": 5, "saves_count": 1, "comments_count": 0, "views_count": 100,
             "created_at": "2026-09-01T10:00:00+00:00"},
            {"id": "p-brand", "user_id": ALICE, "title": "Brand Identity for Logo Studio", "description": "Full identity",
             "image_url": f"{BUCKET_URL}/alice/brand.jpg", "category_id": "cat-design",
             "likes_count": 2, "saves_count": 2, "comments_count": 2, "views_count": 50,
             "created_at": "2026-09-05T10:00:00+00:00"},
            {"id": "p-street", "user_id": BOB, "title": "Street at night", "description": "Neon logo reflections",
             "image_url": f"{BUCKET_URL}/bob/street.webp", "category_id": "cat-photo",
             "likes_count": 9, "saves_count": 0, "comments_count": 1, "views_count": 300,
             "created_at": "2026-08-20T10:00:00+00:00"},
            {"id": "p-reel", "user_id": BOB, "title": "Showreel", "description": None,
             "image_url": f"{BUCKET_URL}/bob/reel.mp4", "category_id": "cat-video",
             "likes_count": 3, "saves_count": 3, "comments_count": 4, "views_count": 80,
             "created_at": "2026-10-01T10:00:00+00:00"},
        ],
        "likes": [
            {"id": "l1", "user_id": ALICE, "project_id": "p-street", "created_at": "2026-09-02T00:00:00+00:00"},
        ],
        "saves": [
            {"id": "s1", "user_id": ALICE, "project_id": "p-reel", "created_at": "2025-10-02T00:00:00+00:00"},
        ],
        "comments": [],
    }


@pytest.fixture
def fake_db():
    db = FakeSupabase(seed_tables())
    db.auth.tokens = {"token-alice": ALICE, "token-bob": BOB, "token-carol": CAROL}
    return db


@pytest.fixture(autouse=True)
def reset_in_process_state():
    clear_auth_cache()
    recent_searches.reset()
    availability_cache.reset()
    hub.reset()
    yield
    clear_auth_cache()
    recent_searches.reset()
    availability_cache.reset()
    hub.reset()


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_supabase] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth(token="token-alice"):
    return {"Authorization": f"Bearer {token}"}
