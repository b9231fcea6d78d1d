"""API schemas for the catalog service.

Pydantic models for request/response validation and serialization.
Prices are exact decimals internally and plain JSON numbers on the wire.
"""

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[dict] | dict = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Category Schemas
# ============================================================================


class CategorySchema(BaseModel):
    """Category representation."""

    code: str = Field(..., description="Unique category code")
    name: str = Field(..., description="Category name")


class CategoryCreateRequest(BaseModel):
    """Request to create a category.

    Fields default to empty so that missing values are reported by the
    category validation rules rather than by schema validation.
    """

    code: str = Field(default="", description="Unique category code (max 50 chars)")
    name: str = Field(default="", description="Category name (max 255 chars)")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product summary as shown in listings."""

    code: str = Field(..., description="Unique product code")
    price: float = Field(..., description="Product price")
    category: CategorySchema = Field(..., description="Product category")


class ProductListResponse(BaseModel):
    """Paginated product listing."""

    products: list[ProductSchema] = Field(..., description="Products on this page")
    total: int = Field(..., description="Total matching products, ignoring pagination")


class VariantSchema(BaseModel):
    """Product variant with its effective price."""

    name: str = Field(..., description="Variant name")
    sku: str = Field(..., description="Stock keeping unit")
    price: float = Field(
        ..., description="Effective price (product price when the variant has none)"
    )


class ProductDetailResponse(BaseModel):
    """Full product detail."""

    code: str = Field(..., description="Unique product code")
    price: float = Field(..., description="Product price")
    category: CategorySchema = Field(..., description="Product category")
    variants: list[VariantSchema] = Field(..., description="Product variants")
