"""Catalog API endpoints.

Provides endpoints for listing products and retrieving product details.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Query

from catalog_service.api.dependencies import get_catalog_service
from catalog_service.api.schemas import (
    CategorySchema,
    ErrorResponse,
    ProductDetailResponse,
    ProductListResponse,
    ProductSchema,
    VariantSchema,
)
from catalog_service.catalog.records import ProductFilters, ProductRecord
from catalog_service.catalog.service import CatalogService, ProductDetail, ProductPage
from catalog_service.catalog.validation import clamp_limit, parse_price_threshold
from catalog_service.infrastructure.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/catalog", tags=["Catalog"])

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


# ============================================================================
# Query Parsing
# ============================================================================


def parse_int_param(value: str | None, default: int) -> int:
    """Parse an integer query parameter, falling back to a default.

    Only an optional sign followed by ASCII digits is accepted. Unparsable
    values and values outside the signed 64-bit range are ignored rather
    than rejected.
    """
    if not value:
        return default
    digits = value[1:] if value[0] in "+-" else value
    if not (digits.isascii() and digits.isdigit()) or len(digits) > 19:
        return default
    parsed = int(value)
    if not INT64_MIN <= parsed <= INT64_MAX:
        return default
    return parsed


# ============================================================================
# Converters
# ============================================================================


def product_to_schema(product: ProductRecord) -> ProductSchema:
    """Convert product record to listing schema."""
    return ProductSchema(
        code=product.code,
        price=float(product.price),
        category=CategorySchema(
            code=product.category.code,
            name=product.category.name,
        ),
    )


def page_to_response(page: ProductPage) -> ProductListResponse:
    """Convert product page to response schema."""
    return ProductListResponse(
        products=[product_to_schema(p) for p in page.items],
        total=page.total,
    )


def detail_to_response(detail: ProductDetail) -> ProductDetailResponse:
    """Convert product detail to response schema."""
    return ProductDetailResponse(
        code=detail.code,
        price=float(detail.price),
        category=CategorySchema(
            code=detail.category.code,
            name=detail.category.name,
        ),
        variants=[
            VariantSchema(
                name=v.name,
                sku=v.sku,
                price=float(v.effective_price),
            )
            for v in detail.variants
        ],
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="List products",
    description="List products with optional category and price filters.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    offset: Annotated[str | None, Query(description="Products to skip")] = None,
    limit: Annotated[
        str | None, Query(description="Page size, clamped to [1, 100]")
    ] = None,
    category: Annotated[
        str | None, Query(description="Exact category code")
    ] = None,
    price_less_than: Annotated[
        str | None,
        Query(alias="priceLessThan", description="Strict upper bound on price"),
    ] = None,
) -> ProductListResponse:
    """List products.

    Args:
        service: Catalog service.
        offset: Raw offset parameter.
        limit: Raw limit parameter.
        category: Category code filter.
        price_less_than: Raw price ceiling.

    Returns:
        Page of products with total count.

    Raises:
        InvalidPriceFilterError: If priceLessThan is malformed or negative.
        InvalidPaginationError: If offset is negative.
    """
    filters = ProductFilters(
        offset=parse_int_param(offset, 0),
        limit=clamp_limit(
            parse_int_param(limit, settings.default_page_limit),
            upper=settings.max_page_limit,
        ),
        category_code=category or None,
        price_less_than=parse_price_threshold(price_less_than),
    )

    page = await service.list_products(filters)

    logger.info(
        "Listed products",
        offset=filters.offset,
        limit=filters.limit,
        returned=len(page.items),
        total=page.total,
    )

    return page_to_response(page)


@router.get(
    "/{code}",
    response_model=ProductDetailResponse,
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get product details",
    description="Get a product with its category and variants.",
)
async def get_product(
    code: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductDetailResponse:
    """Get a product by code.

    Variants without their own price are shown at the product price.

    Raises:
        ProductNotFoundError: If the product does not exist.
    """
    detail = await service.get_product_detail(code)
    return detail_to_response(detail)
