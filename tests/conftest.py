"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock
from uuid import uuid4

# Settings are read at import time; keep tests independent of a local .env
os.environ.setdefault("LIBRARY_JWT_SECRET", "test-secret-key-for-testing-only")
os.environ.setdefault("LIBRARY_DEBUG", "false")

import pytest
import pytest_asyncio
import strawberry
from mongomock_motor import AsyncMongoMockClient

from library_api.auth.adapters.jwt import JWTAuthAdapter
from library_api.auth.context import AuthContext
from library_api.database.models import UserDocument
from library_api.database.store import LibraryStore


def make_store() -> LibraryStore:
    """Fresh in-memory store on a uniquely named database."""
    client = AsyncMongoMockClient()
    return LibraryStore(client[f"library_test_{uuid4().hex}"])


@pytest.fixture
def http_store() -> LibraryStore:
    """In-memory store without indexes; the application lifespan creates them."""
    return make_store()


@pytest_asyncio.fixture
async def store() -> LibraryStore:
    """In-memory document store with indexes in place."""
    library_store = make_store()
    await library_store.ensure_indexes()
    return library_store


@pytest.fixture
def secret_key() -> str:
    return "test-secret-key-for-testing-only"


@pytest.fixture
def token_adapter(secret_key: str) -> JWTAuthAdapter:
    return JWTAuthAdapter(secret_key=secret_key)


@pytest_asyncio.fixture
async def user(store: LibraryStore) -> UserDocument:
    return await store.insert_user("mluukkai", "refactoring")


@pytest.fixture
def make_context(
    store: LibraryStore, token_adapter: JWTAuthAdapter
) -> Callable[..., dict[str, Any]]:
    """Build a GraphQL context dict, optionally logged in as ``current_user``."""

    def _make(current_user: UserDocument | None = None) -> dict[str, Any]:
        return {
            "request": None,
            "store": store,
            "auth": AuthContext(current_user=current_user),
            "token_adapter": token_adapter,
        }

    return _make


@pytest.fixture
def make_info(make_context: Callable[..., dict[str, Any]]) -> Callable[..., MagicMock]:
    """Build a mock strawberry Info for calling resolvers directly."""

    def _make(current_user: UserDocument | None = None, field_name: str = "test") -> MagicMock:
        info = MagicMock(spec=strawberry.Info)
        info.context = make_context(current_user)
        info.field_name = field_name
        return info

    return _make


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
