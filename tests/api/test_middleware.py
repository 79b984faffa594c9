"""Tests for API middleware."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from storefront.api.dependencies import get_catalog
from storefront.main import app


class BrokenCatalog:
    """Catalog stand-in whose queries fail."""

    product_count = 0

    def get_categories(self) -> list:
        raise RuntimeError("catalog unavailable")


@pytest.fixture
def broken_client() -> Iterator[TestClient]:
    """Create test client whose catalog raises on every query."""
    app.dependency_overrides[get_catalog] = lambda: BrokenCatalog()
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRequestIdMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        # UUID format
        assert len(response.headers["X-Request-ID"]) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        response = client.get("/brands", headers={"X-Request-ID": "custom-request-id-12345"})
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == "custom-request-id-12345"

    def test_request_id_on_not_found(self, client: TestClient) -> None:
        """Error envelopes carry the same ID as the header."""
        response = client.get("/products/99999", headers={"X-Request-ID": "req-404"})
        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "req-404"
        assert response.json()["request_id"] == "req-404"


class TestErrorHandlerMiddleware:
    """Tests for unhandled exception handling."""

    def test_unhandled_error_returns_envelope(self, broken_client: TestClient) -> None:
        """Unhandled exceptions become a 500 envelope."""
        response = broken_client.get("/categories")
        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "INTERNAL_ERROR"
        assert data["details"] == []

    def test_unhandled_error_keeps_provided_request_id(
        self, broken_client: TestClient
    ) -> None:
        """A 500 response still echoes the request ID."""
        response = broken_client.get("/categories", headers={"X-Request-ID": "req-9"})
        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "req-9"
        assert response.json()["request_id"] == "req-9"

    def test_unhandled_error_gets_generated_request_id(
        self, broken_client: TestClient
    ) -> None:
        """A generated request ID also reaches the 500 response."""
        response = broken_client.get("/categories")
        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 36
        assert response.json()["request_id"] == request_id
