"""Tests for the shared store handle lifecycle."""

import pytest

from library_api.database import connection
from library_api.database.store import LibraryStore


@pytest.fixture(autouse=True)
def clean_connection_state():
    connection.reset_store()
    yield
    connection.close_store()


def test_get_store_before_init_raises():
    with pytest.raises(RuntimeError, match="not initialized"):
        connection.get_store()


def test_init_store_is_shared_until_forced():
    store = connection.init_store("mongodb://localhost:27017", "library_test")

    assert isinstance(store, LibraryStore)
    assert store.database.name == "library_test"
    assert connection.get_store() is store
    assert connection.init_store() is store
    assert connection.init_store(force_reinit=True) is not store


def test_close_store_forgets_handle():
    connection.init_store("mongodb://localhost:27017", "library_test")

    connection.close_store()

    with pytest.raises(RuntimeError):
        connection.get_store()


@pytest.mark.asyncio
async def test_check_connection_without_store():
    ok, error = await connection.check_store_connection()

    assert ok is False
    assert error == "Document store not initialized"


@pytest.mark.asyncio
async def test_check_connection_with_reachable_store(store):
    ok, error = await connection.check_store_connection(store)

    assert ok is True
    assert error is None
