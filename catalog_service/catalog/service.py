"""Catalog service for product and category operations.

High-level service that combines store reads with the catalog business
rules: pagination and filter validation, total-count consistency, and
variant price inheritance.
"""

from dataclasses import dataclass
from decimal import Decimal

import structlog

from catalog_service.catalog.records import (
    CategoryRecord,
    ProductFilters,
    ProductRecord,
    VariantRecord,
)
from catalog_service.catalog.store import CatalogStore, CatalogStoreError, CategoryStore
from catalog_service.catalog.validation import validate_pagination, validate_price_threshold
from catalog_service.domain.exceptions import (
    CategoryCodeExistsError,
    InternalQueryError,
    InvalidCategoryError,
    InvalidProductCodeError,
    ProductNotFoundError,
)

logger = structlog.get_logger()

MAX_CATEGORY_CODE_LENGTH = 50
MAX_CATEGORY_NAME_LENGTH = 255


# ============================================================================
# Result Types
# ============================================================================


@dataclass(frozen=True)
class ProductPage:
    """One page of a product listing.

    Attributes:
        items: Products on this page, in primary key order.
        total: Number of products matching the filters, ignoring pagination.
        offset: Offset the page was fetched with.
        limit: Page size the page was fetched with.
    """

    items: list[ProductRecord]
    total: int
    offset: int
    limit: int

    @property
    def has_more(self) -> bool:
        """Check if there are matching products after this page."""
        return self.offset + len(self.items) < self.total


@dataclass(frozen=True)
class ResolvedVariant:
    """A variant with its effective price resolved.

    Attributes:
        name: Variant name.
        sku: Variant SKU.
        price: Price as stored (None or zero when absent).
        effective_price: Price to display.
        inherited: True when the effective price came from the product.
    """

    name: str
    sku: str
    price: Decimal | None
    effective_price: Decimal
    inherited: bool


@dataclass(frozen=True)
class ProductDetail:
    """A product with category and resolved variants."""

    product: ProductRecord
    variants: list[ResolvedVariant]

    @property
    def code(self) -> str:
        return self.product.code

    @property
    def price(self) -> Decimal:
        return self.product.price

    @property
    def category(self) -> CategoryRecord:
        return self.product.category


def resolve_variant(variant: VariantRecord, product_price: Decimal) -> ResolvedVariant:
    """Apply price inheritance to a single variant.

    A variant with an explicit non-zero price keeps it; otherwise the
    product price is used. The stored record is left untouched.

    Args:
        variant: Stored variant.
        product_price: Price of the owning product.

    Returns:
        Variant with effective price.
    """
    if variant.has_own_price:
        effective_price = variant.price
        inherited = False
    else:
        effective_price = product_price
        inherited = True

    return ResolvedVariant(
        name=variant.name,
        sku=variant.sku,
        price=variant.price,
        effective_price=effective_price,
        inherited=inherited,
    )


# ============================================================================
# Catalog Service
# ============================================================================


class CatalogService:
    """Read-only service for product listings and product detail.

    The service holds no state between calls and never caches; every call
    goes to the store.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(SqlCatalogStore(session))
            page = await service.list_products(ProductFilters(category_code="SHOES"))
    """

    def __init__(self, store: CatalogStore) -> None:
        """Initialize service.

        Args:
            store: Catalog store to read from.
        """
        self.store = store

    async def list_products(self, filters: ProductFilters) -> ProductPage:
        """List products matching filters, one page at a time.

        Args:
            filters: Filter and pagination parameters.

        Returns:
            Page of products plus the total number of matches.

        Raises:
            InvalidPaginationError: If offset < 0 or limit <= 0.
            InvalidPriceFilterError: If the price ceiling is negative.
            InternalQueryError: If the store fails.
        """
        validate_pagination(filters.offset, filters.limit)
        if filters.price_less_than is not None:
            validate_price_threshold(filters.price_less_than)

        logger.debug(
            "Listing products",
            offset=filters.offset,
            limit=filters.limit,
            category_code=filters.category_code,
            price_less_than=(
                str(filters.price_less_than) if filters.price_less_than is not None else None
            ),
        )

        try:
            total = await self.store.count_products(filters)
            if filters.offset >= total:
                products = []
            else:
                products = await self.store.fetch_products_page(filters)
        except CatalogStoreError as e:
            logger.exception("Product listing failed", operation=e.operation)
            raise InternalQueryError(e.operation, e.reason) from e

        return ProductPage(
            items=list(products),
            total=total,
            offset=filters.offset,
            limit=filters.limit,
        )

    async def get_product_detail(self, code: str) -> ProductDetail:
        """Get a product with its category and price-resolved variants.

        Args:
            code: Product code (exact match).

        Returns:
            Product detail.

        Raises:
            InvalidProductCodeError: If the code is empty.
            ProductNotFoundError: If no product has this code.
            InternalQueryError: If the store fails.
        """
        if not code or not code.strip():
            raise InvalidProductCodeError(code)

        try:
            product = await self.store.fetch_product_by_code(code)
        except CatalogStoreError as e:
            logger.exception("Product lookup failed", code=code, operation=e.operation)
            raise InternalQueryError(e.operation, e.reason) from e

        if product is None:
            logger.info("Product not found", code=code)
            raise ProductNotFoundError(code)

        variants = [resolve_variant(v, product.price) for v in product.variants]
        return ProductDetail(product=product, variants=variants)


# ============================================================================
# Category Service
# ============================================================================


class CategoryService:
    """Service for listing and creating categories."""

    def __init__(self, store: CategoryStore) -> None:
        """Initialize service.

        Args:
            store: Category store.
        """
        self.store = store

    async def list_categories(self) -> list[CategoryRecord]:
        """List all categories.

        Raises:
            InternalQueryError: If the store fails.
        """
        try:
            categories = await self.store.list_categories()
        except CatalogStoreError as e:
            logger.exception("Failed to fetch categories", operation=e.operation)
            raise InternalQueryError(e.operation, e.reason) from e

        logger.info("Fetched categories", count=len(categories))
        return categories

    async def create_category(self, code: str, name: str) -> CategoryRecord:
        """Create a new category.

        Args:
            code: Unique category code.
            name: Category name.

        Returns:
            Created category.

        Raises:
            InvalidCategoryError: If code or name fails validation.
            CategoryCodeExistsError: If the code is already taken.
            InternalQueryError: If the store fails.
        """
        validate_category(code, name)

        try:
            if await self.store.get_category(code) is not None:
                logger.warning("Duplicate category code", code=code)
                raise CategoryCodeExistsError(code)
            category = await self.store.add_category(code, name)
        except CatalogStoreError as e:
            logger.exception("Failed to create category", code=code, operation=e.operation)
            raise InternalQueryError(e.operation, e.reason) from e

        logger.info("Created category", code=category.code)
        return category


def validate_category(code: str | None, name: str | None) -> None:
    """Validate category fields before creation.

    Raises:
        InvalidCategoryError: On a missing, blank or too long field.
    """
    if not code or not name:
        raise InvalidCategoryError("code and name are required")
    if not code.strip():
        raise InvalidCategoryError("code cannot be whitespace only", field="code")
    if not name.strip():
        raise InvalidCategoryError("name cannot be whitespace only", field="name")
    if len(code) > MAX_CATEGORY_CODE_LENGTH:
        raise InvalidCategoryError(
            f"code too long: maximum {MAX_CATEGORY_CODE_LENGTH} characters", field="code"
        )
    if len(name) > MAX_CATEGORY_NAME_LENGTH:
        raise InvalidCategoryError(
            f"name too long: maximum {MAX_CATEGORY_NAME_LENGTH} characters", field="name"
        )
