"""Domain exceptions.

All domain-level errors raised by the catalog core. Each failure kind has its
own class so the API layer can map it to a distinct external signal
(bad request, not found, conflict, server fault).
"""

from decimal import Decimal
from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Query Errors
# ============================================================================


class CatalogQueryError(DomainError):
    """Base class for errors on the product read path."""

    pass


class InvalidPaginationError(CatalogQueryError):
    """Raised when offset is negative or limit is not positive."""

    def __init__(self, offset: int, limit: int) -> None:
        """Initialize invalid pagination error.

        Args:
            offset: Requested offset.
            limit: Requested page size.
        """
        super().__init__(
            f"Invalid pagination parameters: offset={offset}, limit={limit}. "
            "Offset must be >= 0 and limit must be > 0",
            details={"offset": offset, "limit": limit},
        )


class InvalidPriceFilterError(CatalogQueryError):
    """Raised when a price threshold is malformed or negative."""

    def __init__(self, value: str | Decimal, reason: str) -> None:
        """Initialize invalid price filter error.

        Args:
            value: The rejected threshold as supplied.
            reason: Explanation of why the value was rejected.
        """
        super().__init__(
            f"Invalid priceLessThan {str(value)!r}: {reason}",
            details={"value": str(value), "reason": reason},
        )


class InvalidProductCodeError(CatalogQueryError):
    """Raised when a product lookup is attempted with an empty code."""

    def __init__(self, code: str | None) -> None:
        super().__init__(
            "Product code is required",
            details={"code": code},
        )


class ProductNotFoundError(CatalogQueryError):
    """Raised when no product exists for the requested code.

    This is an expected outcome, not a fault.
    """

    def __init__(self, code: str) -> None:
        """Initialize product not found error.

        Args:
            code: The product code that was looked up.
        """
        super().__init__(
            f"Product not found: {code}",
            details={"code": code},
        )


class InternalQueryError(CatalogQueryError):
    """Raised when the underlying catalog store fails.

    The original store exception is available as ``__cause__``.
    """

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize internal query error.

        Args:
            operation: Store operation that failed.
            reason: Description of the underlying failure.
        """
        super().__init__(
            f"Catalog store failure during {operation}: {reason}",
            details={"operation": operation},
        )


# ============================================================================
# Category Errors
# ============================================================================


class CategoryError(DomainError):
    """Base class for category-related errors."""

    pass


class InvalidCategoryError(CategoryError):
    """Raised when category data fails validation."""

    def __init__(self, reason: str, field: str | None = None) -> None:
        """Initialize invalid category error.

        Args:
            reason: Explanation of what is wrong.
            field: Offending field, if any.
        """
        super().__init__(
            f"Invalid category data: {reason}",
            details={"field": field, "reason": reason},
        )


class CategoryCodeExistsError(CategoryError):
    """Raised when creating a category whose code is already taken."""

    def __init__(self, code: str) -> None:
        """Initialize category code exists error.

        Args:
            code: The duplicate category code.
        """
        super().__init__(
            f"Category code already exists: {code}",
            details={"code": code},
        )
