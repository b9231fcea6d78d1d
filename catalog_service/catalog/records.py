"""Read records and request values for the catalog core.

Store implementations return these immutable records instead of ORM
objects, so the query path never holds on to sessions or lazy relations.
"""

from dataclasses import dataclass, field
from decimal import Decimal

DEFAULT_PAGE_LIMIT = 10


@dataclass(frozen=True)
class CategoryRecord:
    """A product category.

    Attributes:
        code: Unique category code (e.g. "CLOTHING").
        name: Human-readable name.
    """

    code: str
    name: str


# Stands in for a missing category on products stored without one.
UNCATEGORIZED = CategoryRecord(code="", name="")


@dataclass(frozen=True)
class VariantRecord:
    """A stored product variant.

    Attributes:
        name: Variant name.
        sku: Unique stock keeping unit.
        price: Stored price. ``None`` or zero means "use the product price".
    """

    name: str
    sku: str
    price: Decimal | None = None

    @property
    def has_own_price(self) -> bool:
        """Whether the variant carries an explicit, non-zero price."""
        return self.price is not None and not self.price.is_zero()


@dataclass(frozen=True)
class ProductRecord:
    """A stored product with its category and variants.

    Attributes:
        code: Unique product code (business key).
        price: Product price.
        category: Owning category.
        variants: Variants in primary key order.
    """

    code: str
    price: Decimal
    category: CategoryRecord
    variants: tuple[VariantRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ProductFilters:
    """Filter and pagination parameters for a product listing.

    Built per request and validated by the catalog service before any
    store access.

    Attributes:
        offset: Number of matching products to skip.
        limit: Maximum number of products to return.
        category_code: Exact, case-sensitive category code to match.
        price_less_than: Strict upper bound on product price.
    """

    offset: int = 0
    limit: int = DEFAULT_PAGE_LIMIT
    category_code: str | None = None
    price_less_than: Decimal | None = None

    @property
    def has_category_filter(self) -> bool:
        """Whether a category restriction applies (empty string means none)."""
        return bool(self.category_code)
