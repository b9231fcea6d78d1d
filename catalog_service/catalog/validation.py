"""Validation rules shared by the catalog service and the API layer."""

from decimal import Decimal, InvalidOperation

from catalog_service.catalog.records import DEFAULT_PAGE_LIMIT
from catalog_service.domain.exceptions import (
    InvalidPaginationError,
    InvalidPriceFilterError,
)

MIN_PAGE_LIMIT = 1
MAX_PAGE_LIMIT = 100

__all__ = [
    "DEFAULT_PAGE_LIMIT",
    "MAX_PAGE_LIMIT",
    "MIN_PAGE_LIMIT",
    "clamp_limit",
    "parse_price_threshold",
    "validate_pagination",
    "validate_price_threshold",
]


def validate_pagination(offset: int, limit: int) -> None:
    """Check that offset >= 0 and limit > 0.

    Raises:
        InvalidPaginationError: If either bound is violated.
    """
    if offset < 0 or limit <= 0:
        raise InvalidPaginationError(offset, limit)


def validate_price_threshold(value: Decimal) -> Decimal:
    """Check that a price threshold is a finite, non-negative decimal.

    Returns:
        The value unchanged.

    Raises:
        InvalidPriceFilterError: If the value is NaN, infinite or negative.
    """
    if not value.is_finite():
        raise InvalidPriceFilterError(value, "must be a finite number")
    if value < 0:
        raise InvalidPriceFilterError(value, "must be a non-negative number")
    return value


def parse_price_threshold(raw: str | Decimal | None) -> Decimal | None:
    """Parse a caller-supplied price ceiling.

    Args:
        raw: Threshold as a string or Decimal. None or an empty string
            means no price filter.

    Returns:
        The parsed threshold, or None when no filter was supplied.

    Raises:
        InvalidPriceFilterError: If the value is malformed or negative.
    """
    if raw is None:
        return None
    if isinstance(raw, Decimal):
        return validate_price_threshold(raw)

    text = raw.strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise InvalidPriceFilterError(raw, "must be a valid number") from None
    return validate_price_threshold(value)


def clamp_limit(limit: int, lower: int = MIN_PAGE_LIMIT, upper: int = MAX_PAGE_LIMIT) -> int:
    """Clamp an externally supplied page size into [lower, upper]."""
    return max(lower, min(limit, upper))
