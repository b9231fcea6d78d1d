"""Reference catalog data.

Three categories and eight products, some with variants that carry no
price of their own. Used by the seeding script and by tests.
"""

from decimal import Decimal

import structlog
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_service.catalog.models import Category, Product, ProductVariant
from catalog_service.catalog.records import CategoryRecord, VariantRecord
from catalog_service.catalog.store import InMemoryCatalogStore

logger = structlog.get_logger()

CATEGORIES: list[tuple[str, str]] = [
    ("CLOTHING", "Clothing"),
    ("SHOES", "Shoes"),
    ("ACCESSORIES", "Accessories"),
]

# (code, price, category code, [(variant name, sku, price or None)])
PRODUCTS: list[tuple[str, str, str, list[tuple[str, str, str | None]]]] = [
    ("PROD001", "10.99", "CLOTHING", [
        ("Variant A", "SKU001A", "11.99"),
        ("Variant B", "SKU001B", None),
    ]),
    ("PROD002", "12.49", "SHOES", [
        ("Variant A", "SKU002A", None),
    ]),
    ("PROD003", "8.75", "ACCESSORIES", [
        ("Variant A", "SKU003A", "9.25"),
        ("Variant B", "SKU003B", None),
    ]),
    ("PROD004", "15.00", "CLOTHING", [
        ("Variant A", "SKU004A", None),
    ]),
    ("PROD005", "20.00", "ACCESSORIES", []),
    ("PROD006", "9.99", "SHOES", [
        ("Variant A", "SKU006A", None),
        ("Variant B", "SKU006B", "10.49"),
    ]),
    ("PROD007", "5.50", "CLOTHING", []),
    ("PROD008", "30.00", "ACCESSORIES", [
        ("Variant A", "SKU008A", "32.00"),
    ]),
]


def _price(value: str | None) -> Decimal | None:
    return Decimal(value) if value is not None else None


def build_in_memory_store() -> InMemoryCatalogStore:
    """Create an in-memory store holding the reference catalog."""
    categories = {code: CategoryRecord(code=code, name=name) for code, name in CATEGORIES}
    store = InMemoryCatalogStore(categories=categories.values())
    for code, price, category_code, variants in PRODUCTS:
        store.add_product(
            code,
            Decimal(price),
            categories[category_code],
            [VariantRecord(name=n, sku=s, price=_price(p)) for n, s, p in variants],
        )
    return store


async def seed_database(session: AsyncSession, clear_existing: bool = True) -> dict[str, int]:
    """Write the reference catalog to the database.

    Args:
        session: Async SQLAlchemy session. Committed on success.
        clear_existing: Delete existing catalog rows first.

    Returns:
        Counts of deleted and created rows.
    """
    deleted = 0
    if clear_existing:
        await session.execute(delete(ProductVariant))
        result = await session.execute(delete(Product))
        deleted = result.rowcount or 0
        await session.execute(delete(Category))

    categories = {code: Category(code=code, name=name) for code, name in CATEGORIES}
    session.add_all(categories.values())

    variant_count = 0
    for code, price, category_code, variants in PRODUCTS:
        product = Product(
            code=code,
            price=Decimal(price),
            category=categories[category_code],
            variants=[
                ProductVariant(name=n, sku=s, price=_price(p)) for n, s, p in variants
            ],
        )
        variant_count += len(variants)
        session.add(product)

    await session.commit()

    logger.info(
        "Seeded catalog",
        deleted=deleted,
        categories=len(categories),
        products=len(PRODUCTS),
        variants=variant_count,
    )

    return {
        "deleted": deleted,
        "categories_created": len(categories),
        "products_created": len(PRODUCTS),
        "variants_created": variant_count,
    }
