import httpx
import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from app.config import settings
from app.database.supabase_client import SupabaseClient, connection_error
from app.main import app
from app.modules.system.service import CONNECTION_CHECKLIST, NETWORK_UNREACHABLE, UNKNOWN_CHECK_ERROR


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(settings, "supabase_url", "https://abc.supabase.co")
    monkeypatch.setattr(settings, "supabase_publishable_key", "k" * 40)


@pytest.fixture
def unconfigured(monkeypatch):
    monkeypatch.setattr(settings, "supabase_url", "")
    monkeypatch.setattr(settings, "supabase_publishable_key", "")


def use_backend(monkeypatch, fake_db):
    monkeypatch.setattr(SupabaseClient, "get_client", classmethod(lambda cls: fake_db))


def test_root_and_health():
    client = TestClient(app)
    assert client.get("/").json()["message"] == "Welcome to nexus-backend"
    assert client.get("/health").json() == {"status": "healthy"}


def test_security_headers():
    response = TestClient(app).get("/health")
    assert response.headers["x-content-type-options"] == "nosniff"


def test_status_unconfigured(unconfigured):
    body = TestClient(app).get("/api/v1/system/backend-status").json()
    assert body["configured"] is False
    assert body["connected"] is False
    assert "SUPABASE_URL" in body["message"]
    assert body["env"]["url"]["exists"] is False


def test_routes_return_503_when_unconfigured(unconfigured):
    response = TestClient(app).get("/api/v1/categories")
    assert response.status_code == 503
    assert "SUPABASE_URL and SUPABASE_PUBLISHABLE_KEY" in response.json()["detail"]


def test_ready_unconfigured(unconfigured):
    assert TestClient(app).get("/ready").status_code == 503


def test_status_connected(configured, monkeypatch, fake_db):
    use_backend(monkeypatch, fake_db)
    body = TestClient(app).get("/api/v1/system/backend-status").json()
    assert body["configured"] is True
    assert body["connected"] is True
    assert body["message"] is None
    assert TestClient(app).get("/ready").json() == {"status": "ready"}


def test_status_not_found_counts_as_connected(configured, monkeypatch, fake_db):
    fake_db.fail("profiles", "select", APIError({"message": "no rows", "code": "PGRST116", "details": None, "hint": None}))
    use_backend(monkeypatch, fake_db)
    assert TestClient(app).get("/api/v1/system/backend-status").json()["connected"] is True


def test_status_database_error(configured, monkeypatch, fake_db):
    fake_db.fail("profiles", "select", APIError({"message": "permission denied", "code": "42501", "details": None, "hint": None}))
    use_backend(monkeypatch, fake_db)
    body = TestClient(app).get("/api/v1/system/backend-status").json()
    assert body["connected"] is False
    assert body["message"] == CONNECTION_CHECKLIST
    assert TestClient(app).get("/ready").status_code == 503


def test_status_network_error(configured, monkeypatch, fake_db):
    fake_db.fail("profiles", "select", httpx.ConnectError("Connection refused"))
    use_backend(monkeypatch, fake_db)
    body = TestClient(app).get("/api/v1/system/backend-status").json()
    assert body["message"] == NETWORK_UNREACHABLE


def test_connection_error_shared_by_status_and_ready(fake_db):
    assert connection_error(fake_db) is None
    fake_db.fail("profiles", "select", APIError({"message": "no rows", "code": "PGRST116", "details": None, "hint": None}))
    assert connection_error(fake_db) is None
    failure = APIError({"message": "permission denied", "code": "42501", "details": None, "hint": None})
    fake_db.fail("profiles", "select", failure)
    assert connection_error(fake_db) is failure


def test_status_when_client_cannot_be_created(configured, monkeypatch):
    def broken(cls):
        raise Exception("Invalid URL")

    monkeypatch.setattr(SupabaseClient, "get_client", classmethod(broken))
    body = TestClient(app).get("/api/v1/system/backend-status").json()
    assert body["connected"] is False
    assert body["message"] == UNKNOWN_CHECK_ERROR
