"""
Document store connection management
"""

from motor.motor_asyncio import AsyncIOMotorClient

from ..config import settings
from ..logging import get_logger
from .store import LibraryStore

logger = get_logger(__name__)

# Process-wide client and store, opened in the application lifespan
_client: AsyncIOMotorClient | None = None
_store: LibraryStore | None = None


def init_store(
    mongodb_uri: str | None = None,
    database_name: str | None = None,
    force_reinit: bool = False,
) -> LibraryStore:
    """Create the shared MongoDB client and store handle.

    The motor client connects lazily; call ``check_store_connection`` to check
    that the server is actually reachable.
    """
    global _client, _store

    if _store is not None and not force_reinit:
        return _store

    if _client is not None:
        _client.close()

    uri = mongodb_uri or settings.mongodb_uri
    name = database_name or settings.mongodb_database

    logger.info("Connecting to document store", database=name)
    _client = AsyncIOMotorClient(
        uri,
        serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
    )
    _store = LibraryStore(_client[name])
    return _store


def get_store() -> LibraryStore:
    """Return the shared store handle.

    Raises:
        RuntimeError: If ``init_store`` has not been called
    """
    if _store is None:
        raise RuntimeError("Document store not initialized. Call init_store() first.")
    return _store


async def check_store_connection(store: LibraryStore | None = None) -> tuple[bool, str | None]:
    """
    Ping the document store.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    target = store or _store
    if target is None:
        return False, "Document store not initialized"

    try:
        await target.ping()
        return True, None
    except Exception as e:
        error_str = str(e)
        if "timed out" in error_str.lower() or "connection refused" in error_str.lower():
            return False, (
                f"Cannot reach MongoDB server: {error_str}\n"
                f"Please check that MongoDB is running and LIBRARY_MONGODB_URI is correct."
            )
        if "authentication failed" in error_str.lower():
            return False, (
                f"MongoDB authentication failed: {error_str}\n"
                f"Please check the credentials in LIBRARY_MONGODB_URI."
            )
        return False, f"Document store connection error ({type(e).__name__}): {error_str}"


def close_store() -> None:
    """Close the shared client and forget the store handle."""
    global _client, _store
    if _client is not None:
        _client.close()
        logger.info("Document store connection closed")
    _client = None
    _store = None


def reset_store() -> None:
    """Reset connection state without closing (for tests)."""
    global _client, _store
    _client = None
    _store = None
