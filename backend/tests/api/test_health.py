"""API tests: health and root endpoints."""
import pytest
from sqlalchemy.exc import OperationalError

from db import get_db
from main import app

pytestmark = pytest.mark.api


def test_api_health_returns_200(client):
    """GET /api/health returns 200 when the database answers."""
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "equipment-api", "database": "ok"}


class _UnreachableSession:
    """Stands in for a session whose database has gone away."""

    def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("unable to open database file"))


def test_api_health_database_down_503(client):
    """GET /api/health reports a degraded service when the database query fails."""
    def override():
        yield _UnreachableSession()

    app.dependency_overrides[get_db] = override
    r = client.get("/api/health")
    assert r.status_code == 503
    assert r.json() == {"status": "degraded", "service": "equipment-api", "database": "unavailable"}


def test_root_returns_info(client):
    """GET / returns service info and docs link."""
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert data["docs"] == "/docs"
    assert data["health"] == "/api/health"


def test_openapi_lists_equipment_routes(client):
    r = client.get("/openapi.json")
    assert r.status_code == 200
    schema = r.json()
    assert schema["info"]["title"] == "Manage Equipment"
    assert "/api/equipment/create" in schema["paths"]
