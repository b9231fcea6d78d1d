"""Tests for catalog API endpoints."""

from fastapi.testclient import TestClient

from catalog_service.api.catalog import parse_int_param
from catalog_service.api.dependencies import get_store
from catalog_service.catalog.records import ProductFilters, ProductRecord
from catalog_service.catalog.store import CatalogStoreError, InMemoryCatalogStore
from catalog_service.main import app


class BrokenStore(InMemoryCatalogStore):
    """Store that fails every product read."""

    async def count_products(self, filters: ProductFilters) -> int:
        raise CatalogStoreError("count_products", "connection refused")

    async def fetch_products_page(self, filters: ProductFilters) -> list[ProductRecord]:
        raise CatalogStoreError("fetch_products_page", "connection refused")

    async def fetch_product_by_code(self, code: str) -> ProductRecord | None:
        raise CatalogStoreError("fetch_product_by_code", "connection refused")


class TestParseIntParam:
    """Tests for lenient integer query parsing."""

    def test_plain_and_signed(self) -> None:
        assert parse_int_param("42", 0) == 42
        assert parse_int_param("-3", 0) == -3
        assert parse_int_param("+7", 0) == 7

    def test_missing(self) -> None:
        assert parse_int_param(None, 10) == 10
        assert parse_int_param("", 10) == 10

    def test_rejected_forms_use_default(self) -> None:
        for raw in ["abc", "1_000", " 5 ", "5.0", "-", "\u0663", "1e3"]:
            assert parse_int_param(raw, 10) == 10, raw

    def test_int64_bounds(self) -> None:
        assert parse_int_param(str(2**63 - 1), 0) == 2**63 - 1
        assert parse_int_param(str(-(2**63)), 0) == -(2**63)
        assert parse_int_param(str(2**63), 0) == 0
        assert parse_int_param("9" * 5000, 0) == 0


class TestListProducts:
    """Tests for GET /catalog endpoint."""

    def test_default_pagination(self, client: TestClient) -> None:
        """Should return at most 10 products with total and categories."""
        response = client.get("/catalog")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"

        data = response.json()
        assert len(data["products"]) == 8
        assert data["total"] == 8

        product = data["products"][0]
        assert product == {
            "code": "PROD001",
            "price": 10.99,
            "category": {"code": "CLOTHING", "name": "Clothing"},
        }

    def test_custom_offset_and_limit(self, client: TestClient) -> None:
        """Should page results while keeping the total."""
        response = client.get("/catalog?offset=2&limit=3")
        assert response.status_code == 200

        data = response.json()
        assert [p["code"] for p in data["products"]] == ["PROD003", "PROD004", "PROD005"]
        assert data["total"] == 8

    def test_large_offset(self, client: TestClient) -> None:
        """Should return an empty page with the full total."""
        response = client.get("/catalog?offset=1000&limit=10")
        assert response.status_code == 200

        data = response.json()
        assert data["products"] == []
        assert data["total"] == 8

    def test_offset_beyond_int64_uses_default(self, client: TestClient) -> None:
        """An offset too large to parse falls back to 0."""
        response = client.get(f"/catalog?offset={10**20}")
        assert response.status_code == 200

        data = response.json()
        assert data["products"][0]["code"] == "PROD001"
        assert data["total"] == 8

    def test_int64_max_offset(self, client: TestClient) -> None:
        """The largest accepted offset is past the end."""
        response = client.get(f"/catalog?offset={2**63 - 1}")
        assert response.status_code == 200
        assert response.json() == {"products": [], "total": 8}

    def test_limit_below_minimum_is_clamped(self, client: TestClient) -> None:
        """limit=0 should behave as limit=1."""
        response = client.get("/catalog?limit=0")
        assert response.status_code == 200
        assert len(response.json()["products"]) == 1

    def test_limit_above_maximum_is_clamped(self, client: TestClient) -> None:
        """limit=500 should behave as limit=100."""
        response = client.get("/catalog?limit=500")
        assert response.status_code == 200
        assert len(response.json()["products"]) == 8

    def test_unparsable_limit_uses_default(self, client: TestClient) -> None:
        """Non-numeric limit falls back to the default."""
        response = client.get("/catalog?limit=abc&offset=xyz")
        assert response.status_code == 200
        data = response.json()
        assert len(data["products"]) == 8
        assert data["products"][0]["code"] == "PROD001"

    def test_negative_offset_rejected(self, client: TestClient) -> None:
        """Negative offset is an invalid pagination request."""
        response = client.get("/catalog?offset=-1")
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "INVALID_PAGINATION"
        assert data["details"] == {"offset": -1, "limit": 10}

    def test_filter_by_category(self, client: TestClient) -> None:
        """Should return only CLOTHING products."""
        response = client.get("/catalog?category=CLOTHING")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 3
        assert {p["code"] for p in data["products"]} == {"PROD001", "PROD004", "PROD007"}
        for product in data["products"]:
            assert product["category"]["code"] == "CLOTHING"

    def test_filter_by_unknown_category(self, client: TestClient) -> None:
        """Unknown category yields no products."""
        response = client.get("/catalog?category=NONEXISTENT")
        assert response.status_code == 200
        assert response.json() == {"products": [], "total": 0}

    def test_filter_by_price(self, client: TestClient) -> None:
        """Should return products strictly cheaper than 15."""
        response = client.get("/catalog?priceLessThan=15")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 5
        assert "PROD004" not in {p["code"] for p in data["products"]}
        for product in data["products"]:
            assert product["price"] < 15.00

    def test_filter_by_very_low_price(self, client: TestClient) -> None:
        """No product costs less than 1."""
        response = client.get("/catalog?priceLessThan=1")
        assert response.status_code == 200
        assert response.json()["total"] == 0

    def test_category_and_price(self, client: TestClient) -> None:
        """Both filters apply together."""
        response = client.get("/catalog?category=SHOES&priceLessThan=10")
        assert response.status_code == 200

        data = response.json()
        assert [p["code"] for p in data["products"]] == ["PROD006"]
        assert data["total"] == 1

    def test_all_filters_and_pagination(self, client: TestClient) -> None:
        """Filters and pagination combine."""
        response = client.get("/catalog?category=CLOTHING&priceLessThan=20&offset=1&limit=5")
        assert response.status_code == 200

        data = response.json()
        assert [p["code"] for p in data["products"]] == ["PROD004", "PROD007"]
        assert data["total"] == 3

    def test_malformed_price_rejected(self, client: TestClient) -> None:
        """Should reject non-numeric priceLessThan."""
        response = client.get("/catalog?priceLessThan=abc")
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_PRICE_FILTER"

    def test_negative_price_rejected(self, client: TestClient) -> None:
        """Should reject negative priceLessThan."""
        response = client.get("/catalog?priceLessThan=-5")
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_PRICE_FILTER"

    def test_request_id_echoed(self, client: TestClient) -> None:
        """Should echo the request ID header."""
        response = client.get("/catalog", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    def test_store_failure(self) -> None:
        """Store failures map to 500 without leaking details."""
        app.dependency_overrides[get_store] = lambda: BrokenStore()
        try:
            response = TestClient(app).get("/catalog")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "INTERNAL_QUERY_ERROR"
        assert data["message"] == "Internal server error"
        assert "connection refused" not in response.text


class TestGetProduct:
    """Tests for GET /catalog/{code} endpoint."""

    def test_product_details(self, client: TestClient) -> None:
        """Should return product with category and variants."""
        response = client.get("/catalog/PROD001")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"

        data = response.json()
        assert data["code"] == "PROD001"
        assert data["price"] == 10.99
        assert data["category"] == {"code": "CLOTHING", "name": "Clothing"}
        assert data["variants"] == [
            {"name": "Variant A", "sku": "SKU001A", "price": 11.99},
            {"name": "Variant B", "sku": "SKU001B", "price": 10.99},
        ]

    def test_variant_price_inheritance(self, client: TestClient) -> None:
        """Variants without a price show the product price."""
        response = client.get("/catalog/PROD006")
        assert response.status_code == 200

        prices = {v["sku"]: v["price"] for v in response.json()["variants"]}
        assert prices == {"SKU006A": 9.99, "SKU006B": 10.49}

    def test_product_without_variants(self, client: TestClient) -> None:
        response = client.get("/catalog/PROD005")
        assert response.status_code == 200
        assert response.json()["variants"] == []

    def test_not_found(self, client: TestClient) -> None:
        """Should return 404 for non-existent product."""
        response = client.get("/catalog/DOES-NOT-EXIST")
        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"

        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert data["details"] == {"code": "DOES-NOT-EXIST"}

    def test_store_failure(self) -> None:
        """Store failures are 500, not 404."""
        app.dependency_overrides[get_store] = lambda: BrokenStore()
        try:
            response = TestClient(app).get("/catalog/PROD001")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json()["error_code"] == "INTERNAL_QUERY_ERROR"
