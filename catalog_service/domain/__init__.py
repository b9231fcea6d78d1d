"""Domain layer - catalog error taxonomy.

Example usage:
    from catalog_service.domain import ProductNotFoundError

    try:
        detail = await service.get_product_detail("PROD001")
    except ProductNotFoundError:
        ...
"""

from catalog_service.domain.exceptions import (
    CatalogQueryError,
    CategoryCodeExistsError,
    CategoryError,
    DomainError,
    InternalQueryError,
    InvalidCategoryError,
    InvalidPaginationError,
    InvalidPriceFilterError,
    InvalidProductCodeError,
    ProductNotFoundError,
)

__all__ = [
    "DomainError",
    # Query path
    "CatalogQueryError",
    "InternalQueryError",
    "InvalidPaginationError",
    "InvalidPriceFilterError",
    "InvalidProductCodeError",
    "ProductNotFoundError",
    # Categories
    "CategoryCodeExistsError",
    "CategoryError",
    "InvalidCategoryError",
]
