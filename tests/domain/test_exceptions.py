"""Tests for domain exceptions."""

from decimal import Decimal

from catalog_service.domain import (
    CatalogQueryError,
    CategoryCodeExistsError,
    CategoryError,
    DomainError,
    InternalQueryError,
    InvalidCategoryError,
    InvalidPaginationError,
    InvalidPriceFilterError,
    ProductNotFoundError,
)


class TestErrorHierarchy:
    """Error kinds stay distinguishable."""

    def test_query_errors(self) -> None:
        for error in (
            InvalidPaginationError(-1, 10),
            InvalidPriceFilterError("abc", "must be a valid number"),
            ProductNotFoundError("PROD999"),
            InternalQueryError("count_products", "timeout"),
        ):
            assert isinstance(error, CatalogQueryError)
            assert isinstance(error, DomainError)

    def test_not_found_is_not_internal(self) -> None:
        assert not isinstance(ProductNotFoundError("X"), InternalQueryError)
        assert not issubclass(InternalQueryError, ProductNotFoundError)

    def test_category_errors(self) -> None:
        assert isinstance(InvalidCategoryError("bad"), CategoryError)
        assert isinstance(CategoryCodeExistsError("SHOES"), CategoryError)
        assert not isinstance(CategoryCodeExistsError("SHOES"), CatalogQueryError)


class TestErrorDetails:
    """Errors carry structured details."""

    def test_pagination_details(self) -> None:
        error = InvalidPaginationError(-1, 0)
        assert error.details == {"offset": -1, "limit": 0}
        assert "offset=-1" in error.message

    def test_price_filter_details(self) -> None:
        error = InvalidPriceFilterError(Decimal("-2.5"), "must be a non-negative number")
        assert error.details == {"value": "-2.5", "reason": "must be a non-negative number"}

    def test_not_found_message(self) -> None:
        error = ProductNotFoundError("PROD999")
        assert str(error) == "Product not found: PROD999"
        assert error.details == {"code": "PROD999"}

    def test_internal_error_details(self) -> None:
        error = InternalQueryError("fetch_products_page", "connection reset")
        assert "connection reset" in error.message
        assert error.details == {"operation": "fetch_products_page"}
