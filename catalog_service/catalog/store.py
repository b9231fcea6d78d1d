"""Catalog store capability and in-memory implementation.

The catalog service depends on the ``CatalogStore`` protocol rather than a
database handle, so it can run against ``SqlCatalogStore`` in production and
``InMemoryCatalogStore`` in tests.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Protocol

from catalog_service.catalog.records import (
    CategoryRecord,
    ProductFilters,
    ProductRecord,
    VariantRecord,
)
from catalog_service.domain.exceptions import CategoryCodeExistsError


class CatalogStoreError(Exception):
    """Raised by store implementations when the backing store fails."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"{operation}: {reason}")
        self.operation = operation
        self.reason = reason


class CatalogStore(Protocol):
    """Read capability required by the catalog service."""

    async def count_products(self, filters: ProductFilters) -> int:
        """Count products matching the category/price filters."""
        ...

    async def fetch_products_page(self, filters: ProductFilters) -> list[ProductRecord]:
        """Fetch one page of matching products in primary key order."""
        ...

    async def fetch_product_by_code(self, code: str) -> ProductRecord | None:
        """Fetch a single product with category and variants."""
        ...


class CategoryStore(Protocol):
    """Capability required by the category service."""

    async def list_categories(self) -> list[CategoryRecord]:
        """List all categories in primary key order."""
        ...

    async def get_category(self, code: str) -> CategoryRecord | None:
        """Get a category by code."""
        ...

    async def add_category(self, code: str, name: str) -> CategoryRecord:
        """Persist a new category.

        Raises:
            CategoryCodeExistsError: If the code is already taken.
        """
        ...


def matches_filters(product: ProductRecord, filters: ProductFilters) -> bool:
    """Check a product against the category and price filters."""
    if filters.has_category_filter and product.category.code != filters.category_code:
        return False
    if filters.price_less_than is not None and not product.price < filters.price_less_than:
        return False
    return True


class InMemoryCatalogStore:
    """In-memory catalog store.

    Products and categories are kept in insertion order, which plays the
    role of primary key order.

    Example usage:
        store = InMemoryCatalogStore()
        store.add_product("PROD001", Decimal("12.00"), CategoryRecord("CLOTHING", "Clothing"))
        service = CatalogService(store)
    """

    def __init__(
        self,
        products: Iterable[ProductRecord] = (),
        categories: Iterable[CategoryRecord] = (),
    ) -> None:
        self._products: list[ProductRecord] = []
        self._categories: dict[str, CategoryRecord] = {}
        for category in categories:
            self._categories[category.code] = category
        for product in products:
            self._put_product(product)

    def _put_product(self, product: ProductRecord) -> None:
        if any(p.code == product.code for p in self._products):
            raise ValueError(f"Duplicate product code: {product.code}")
        self._categories.setdefault(product.category.code, product.category)
        self._products.append(product)

    def add_product(
        self,
        code: str,
        price: Decimal,
        category: CategoryRecord,
        variants: Iterable[VariantRecord] = (),
    ) -> ProductRecord:
        """Add a product. Intended for tests and seeding.

        Args:
            code: Product code.
            price: Product price.
            category: Owning category.
            variants: Product variants.

        Returns:
            The stored record.
        """
        product = ProductRecord(
            code=code,
            price=price,
            category=category,
            variants=tuple(variants),
        )
        self._put_product(product)
        return product

    async def count_products(self, filters: ProductFilters) -> int:
        return sum(1 for p in self._products if matches_filters(p, filters))

    async def fetch_products_page(self, filters: ProductFilters) -> list[ProductRecord]:
        matching = [p for p in self._products if matches_filters(p, filters)]
        return matching[filters.offset : filters.offset + filters.limit]

    async def fetch_product_by_code(self, code: str) -> ProductRecord | None:
        for product in self._products:
            if product.code == code:
                return product
        return None

    async def list_categories(self) -> list[CategoryRecord]:
        return list(self._categories.values())

    async def get_category(self, code: str) -> CategoryRecord | None:
        return self._categories.get(code)

    async def add_category(self, code: str, name: str) -> CategoryRecord:
        if code in self._categories:
            raise CategoryCodeExistsError(code)
        category = CategoryRecord(code=code, name=name)
        self._categories[code] = category
        return category
