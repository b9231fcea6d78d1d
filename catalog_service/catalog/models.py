"""SQLAlchemy models for the product catalog.

Defines Category, Product and ProductVariant tables for persistent storage.
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_service.catalog.records import (
    UNCATEGORIZED,
    CategoryRecord,
    ProductRecord,
    VariantRecord,
)
from catalog_service.infrastructure.database import Base


class Category(Base):
    """Product category.

    Attributes:
        id: Internal identifier.
        code: Unique category code (e.g. "CLOTHING").
        name: Human-readable name.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    products: Mapped[list["Product"]] = relationship("Product", back_populates="category")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(code={self.code}, name={self.name})>"

    def to_record(self) -> CategoryRecord:
        """Convert to an immutable read record."""
        return CategoryRecord(code=self.code, name=self.name)


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Internal identifier; defines canonical listing order.
        code: Unique product code (business key).
        price: Product price.
        category_id: Owning category. Nullable only while data is migrated.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=True,
        index=True,
    )

    # Relationships
    category: Mapped[Category | None] = relationship("Category", back_populates="products")
    variants: Mapped[list["ProductVariant"]] = relationship(
        "ProductVariant",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductVariant.id",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(code={self.code}, price={self.price})>"

    def to_record(self) -> ProductRecord:
        """Convert to an immutable read record.

        Requires ``category`` and ``variants`` to be loaded. A product
        without a category gets an empty one.
        """
        return ProductRecord(
            code=self.code,
            price=self.price,
            category=self.category.to_record() if self.category else UNCATEGORIZED,
            variants=tuple(v.to_record() for v in self.variants),
        )


class ProductVariant(Base):
    """Product variant (e.g. size or colour).

    A NULL or zero price means the variant is sold at the product price.
    """

    __tablename__ = "product_variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    sku: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)

    # Relationships
    product: Mapped[Product] = relationship("Product", back_populates="variants")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductVariant(sku={self.sku}, name={self.name})>"

    def to_record(self) -> VariantRecord:
        """Convert to an immutable read record."""
        return VariantRecord(name=self.name, sku=self.sku, price=self.price)
