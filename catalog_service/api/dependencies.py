"""FastAPI dependencies wiring the store and services per request."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_service.catalog.repository import SqlCatalogStore
from catalog_service.catalog.service import CatalogService, CategoryService
from catalog_service.infrastructure.database import get_session


async def get_store(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SqlCatalogStore:
    """Get a catalog store bound to the request's session."""
    return SqlCatalogStore(session)


def get_catalog_service(
    store: Annotated[SqlCatalogStore, Depends(get_store)],
) -> CatalogService:
    """Get catalog service."""
    return CatalogService(store)


def get_category_service(
    store: Annotated[SqlCatalogStore, Depends(get_store)],
) -> CategoryService:
    """Get category service."""
    return CategoryService(store)
