"""SQL-backed catalog store.

Implements the catalog and category store capabilities on top of an
async SQLAlchemy session.
"""

import structlog
from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_service.catalog.models import Category, Product
from catalog_service.catalog.records import CategoryRecord, ProductFilters, ProductRecord
from catalog_service.catalog.store import CatalogStoreError
from catalog_service.domain.exceptions import CategoryCodeExistsError

logger = structlog.get_logger()


class SqlCatalogStore:
    """Catalog store backed by the relational database.

    Products are returned in ascending primary key order, with category
    and variants eagerly loaded.

    Example usage:
        async with async_session_factory() as session:
            store = SqlCatalogStore(session)
            total = await store.count_products(ProductFilters(category_code="SHOES"))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize store with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def count_products(self, filters: ProductFilters) -> int:
        """Count products matching the filters.

        Args:
            filters: Category and price filters. Pagination is ignored.

        Returns:
            Number of matching products.
        """
        query = self._apply_filters(
            select(func.count(Product.id)).select_from(Product),
            filters,
        )
        try:
            result = await self.session.execute(query)
            return result.scalar_one()
        except (SQLAlchemyError, OSError) as e:
            raise CatalogStoreError("count_products", str(e)) from e

    async def fetch_products_page(self, filters: ProductFilters) -> list[ProductRecord]:
        """Fetch one page of products matching the filters.

        Args:
            filters: Filters plus offset/limit.

        Returns:
            Products in primary key order.
        """
        query = (
            self._apply_filters(select(Product), filters)
            .options(
                selectinload(Product.category),
                selectinload(Product.variants),
            )
            .order_by(Product.id.asc())
            .offset(filters.offset)
            .limit(filters.limit)
        )
        try:
            result = await self.session.execute(query)
            return [self._to_record(p) for p in result.scalars().all()]
        except (SQLAlchemyError, OSError, OverflowError) as e:
            raise CatalogStoreError("fetch_products_page", str(e)) from e

    async def fetch_product_by_code(self, code: str) -> ProductRecord | None:
        """Get a product by its code.

        Args:
            code: Product code (exact match).

        Returns:
            Product if found, None otherwise.
        """
        query = (
            select(Product)
            .where(Product.code == code)
            .options(
                selectinload(Product.category),
                selectinload(Product.variants),
            )
        )
        try:
            result = await self.session.execute(query)
            product = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            raise CatalogStoreError("fetch_product_by_code", str(e)) from e

        if product is None:
            return None
        return self._to_record(product)

    def _apply_filters(self, query: Select, filters: ProductFilters) -> Select:
        if filters.has_category_filter:
            query = query.join(Category, Category.id == Product.category_id).where(
                Category.code == filters.category_code
            )

        if filters.price_less_than is not None:
            query = query.where(Product.price < filters.price_less_than)

        return query

    def _to_record(self, product: Product) -> ProductRecord:
        if product.category is None:
            logger.warning("Product has no category", code=product.code)
        return product.to_record()

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    async def list_categories(self) -> list[CategoryRecord]:
        """List all categories.

        Returns:
            Categories in primary key order.
        """
        try:
            result = await self.session.execute(select(Category).order_by(Category.id.asc()))
            return [c.to_record() for c in result.scalars().all()]
        except (SQLAlchemyError, OSError) as e:
            raise CatalogStoreError("list_categories", str(e)) from e

    async def get_category(self, code: str) -> CategoryRecord | None:
        """Get category by code.

        Args:
            code: Category code.

        Returns:
            Category if found, None otherwise.
        """
        try:
            result = await self.session.execute(select(Category).where(Category.code == code))
            category = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            raise CatalogStoreError("get_category", str(e)) from e
        return category.to_record() if category else None

    async def add_category(self, code: str, name: str) -> CategoryRecord:
        """Save a new category.

        Args:
            code: Unique category code.
            name: Category name.

        Returns:
            Saved category.

        Raises:
            CategoryCodeExistsError: If the unique constraint on code fails.
        """
        category = Category(code=code, name=name)
        self.session.add(category)
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            raise CategoryCodeExistsError(code) from e
        except (SQLAlchemyError, OSError) as e:
            await self.session.rollback()
            raise CatalogStoreError("add_category", str(e)) from e
        return category.to_record()
