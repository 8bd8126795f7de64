"""Shared fixtures.

Environment is pinned before the app is imported so the settings
singleton and the engine point at a throwaway in-memory database.
"""

import os

os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["STORAGE_BACKEND"] = "sql"

import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_product_repository
from app.dao.memory_product_dao import InMemoryProductDAO
from app.main import app


@pytest.fixture
def memory_repo():
    return InMemoryProductDAO()


@pytest.fixture
def client(memory_repo):
    """HTTP client whose product store is a fresh in-memory DAO."""
    app.dependency_overrides[get_product_repository] = lambda: memory_repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sql_client():
    """HTTP client wired to the real SQL DAO on in-memory SQLite."""
    with TestClient(app) as test_client:
        yield test_client
