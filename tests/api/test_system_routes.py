"""API tests for system endpoints and global error handling."""

import pytest
from fastapi.testclient import TestClient

from credential_service.main import create_app


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.mark.api
class TestSystemRoutes:
    """Test system endpoints."""

    def test_health(self, client):
        """Test GET /health reports healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_unknown_route_returns_404(self, client):
        """Test unmapped paths are not swallowed by the error handlers."""
        response = client.get("/auth/unknown")

        assert response.status_code == 404


@pytest.mark.api
class TestUnhandledErrors:
    """Test the catch-all exception handler."""

    def test_unhandled_exception_returns_generic_500(self):
        """Test unexpected errors answer 500 without details."""
        # Arrange
        app = create_app()

        @app.get("/boom")
        async def boom():
            raise RuntimeError("secret internals")

        # Act
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom")

        # Assert
        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}
