"""
Application wiring tests.

Verifies:
- Health endpoint
- Error envelopes for malformed requests and unexpected failures
- Settings-driven seeding and API prefix
"""
from dataclasses import replace

from fastapi.testclient import TestClient

from user_admin_api.app.core.config import settings
from user_admin_api.app.main import create_app
from user_admin_api.app.services.user_service import UserService


def test_health(client: TestClient):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Application is running!", "data": None}


def test_non_integer_id_is_a_validation_error(client: TestClient):
    response = client.get("/api/users/abc")

    assert response.status_code == 422
    assert response.json() == {"success": False, "message": "Request validation failed"}


def test_malformed_body_is_a_validation_error(client: TestClient):
    response = client.post(
        "/api/users",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert response.json()["success"] is False


def test_unknown_route_uses_error_envelope(client: TestClient):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["success"] is False


class _BrokenService(UserService):
    def list_users(self):
        raise RuntimeError("store exploded")


def test_unexpected_error_returns_500_envelope():
    app = create_app(replace(settings, debug=False), user_service=_BrokenService())
    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/users")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error"}


def test_debug_mode_exposes_error_text():
    app = create_app(replace(settings, debug=True), user_service=_BrokenService())
    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/users")

    assert response.status_code == 500
    assert response.json()["message"] == "store exploded"


def test_seeding_can_be_disabled():
    app = create_app(replace(settings, seed_sample_users=False))
    with TestClient(app) as test_client:
        assert test_client.get("/api/users").json()["data"] == []


def test_seeding_enabled_by_setting():
    app = create_app(replace(settings, seed_sample_users=True))
    assert app.state.user_service.count() == 3


def test_custom_api_prefix(seeded_service: UserService):
    app = create_app(replace(settings, api_prefix="/v2"), user_service=seeded_service)
    with TestClient(app) as test_client:
        assert test_client.get("/v2/users").status_code == 200
        assert test_client.get("/api/users").status_code == 404
