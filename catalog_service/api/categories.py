"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from catalog_service.api.dependencies import get_category_service
from catalog_service.api.schemas import (
    CategoryCreateRequest,
    CategorySchema,
    ErrorResponse,
)
from catalog_service.catalog.service import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=list[CategorySchema],
    summary="List categories",
)
async def list_categories(
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> list[CategorySchema]:
    """List all categories."""
    categories = await service.list_categories()
    return [CategorySchema(code=c.code, name=c.name) for c in categories]


@router.post(
    "",
    response_model=CategorySchema,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Create category",
)
async def create_category(
    request: CategoryCreateRequest,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategorySchema:
    """Create a new category.

    Args:
        request: Category code and name.
        service: Category service.

    Returns:
        Created category.

    Raises:
        InvalidCategoryError: If code or name is missing, blank or too long.
        CategoryCodeExistsError: If the code is already taken.
    """
    category = await service.create_category(request.code, request.name)
    return CategorySchema(code=category.code, name=category.name)
