"""Tests for the error envelope handlers."""

from fastapi import APIRouter
from fastapi.testclient import TestClient

from shared.repository import DatabaseError


def add_failing_routes(app):
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    @router.get("/db-down")
    async def db_down():
        raise DatabaseError()

    app.include_router(router)


class TestErrorEnvelope:
    def test_unknown_route(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Not Found"}

    def test_unexpected_error_is_opaque(self, app):
        """Unhandled errors should not leak their message."""
        add_failing_routes(app)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Internal server error"}

    def test_database_error(self, app):
        add_failing_routes(app)
        response = TestClient(app).get("/db-down")

        assert response.status_code == 503
        assert response.json() == {"success": False, "message": "Database unavailable"}

    def test_malformed_json(self, client):
        response = client.post(
            "/api/auth/login",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["success"] is False
