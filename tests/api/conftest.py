"""Shared fixtures for API tests."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from catalog_service.api.dependencies import get_store
from catalog_service.catalog.seed import build_in_memory_store
from catalog_service.catalog.store import InMemoryCatalogStore
from catalog_service.main import app


@pytest.fixture
def store() -> InMemoryCatalogStore:
    """Fresh in-memory store with the reference catalog."""
    return build_in_memory_store()


@pytest.fixture
def client(store: InMemoryCatalogStore) -> Generator[TestClient, None, None]:
    """Create test client backed by the in-memory store."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
