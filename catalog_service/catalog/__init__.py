"""Product Catalog.

Product listing with category/price filters and pagination, product detail
with variant price inheritance, and category management.
"""

from catalog_service.catalog.records import (
    CategoryRecord,
    ProductFilters,
    ProductRecord,
    VariantRecord,
)
from catalog_service.catalog.service import (
    CatalogService,
    CategoryService,
    ProductDetail,
    ProductPage,
    ResolvedVariant,
)
from catalog_service.catalog.store import (
    CatalogStore,
    CatalogStoreError,
    CategoryStore,
    InMemoryCatalogStore,
)

__all__ = [
    # Records
    "CategoryRecord",
    "ProductFilters",
    "ProductRecord",
    "VariantRecord",
    # Stores
    "CatalogStore",
    "CatalogStoreError",
    "CategoryStore",
    "InMemoryCatalogStore",
    # Service
    "CatalogService",
    "CategoryService",
    "ProductDetail",
    "ProductPage",
    "ResolvedVariant",
]
