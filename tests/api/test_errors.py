"""Tests for the error response format."""

from fastapi.testclient import TestClient

from catalog_service.api.dependencies import get_store
from catalog_service.catalog.records import ProductFilters
from catalog_service.catalog.store import InMemoryCatalogStore
from catalog_service.domain.exceptions import (
    CategoryCodeExistsError,
    DomainError,
    InternalQueryError,
    ProductNotFoundError,
)
from catalog_service.main import app, error_status_for


class TestErrorStatusMapping:
    """Domain errors map to distinct HTTP statuses."""

    def test_mapping(self) -> None:
        assert error_status_for(ProductNotFoundError("X")) == (404, "PRODUCT_NOT_FOUND")
        assert error_status_for(InternalQueryError("op", "boom")) == (500, "INTERNAL_QUERY_ERROR")
        assert error_status_for(CategoryCodeExistsError("X")) == (409, "CATEGORY_CODE_EXISTS")

    def test_unmapped_domain_error(self) -> None:
        assert error_status_for(DomainError("other")) == (400, "DOMAIN_ERROR")


class TestRoutingErrors:
    """Routing errors use the standard error body."""

    def test_unknown_path(self, client: TestClient) -> None:
        response = client.get("/nothing-here", headers={"X-Request-ID": "req-404"})
        assert response.status_code == 404

        data = response.json()
        assert data["error_code"] == "NOT_FOUND"
        assert data["request_id"] == "req-404"

    def test_method_not_allowed(self, client: TestClient) -> None:
        response = client.delete("/categories")
        assert response.status_code == 405
        assert response.json()["error_code"] == "METHOD_NOT_ALLOWED"


class ExplodingStore(InMemoryCatalogStore):
    """Store that fails with an unexpected exception."""

    async def count_products(self, filters: ProductFilters) -> int:
        raise RuntimeError("unexpected")


class TestUnhandledErrors:
    """Uncaught exceptions still carry the request ID."""

    def test_request_id_on_internal_error(self) -> None:
        app.dependency_overrides[get_store] = lambda: ExplodingStore()
        try:
            client = TestClient(app, raise_server_exceptions=False)
            response = client.get("/catalog", headers={"X-Request-ID": "req-500"})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "req-500"

        data = response.json()
        assert data["error_code"] == "INTERNAL_ERROR"
        assert data["request_id"] == "req-500"
        assert "unexpected" not in response.text
