"""
Shared context access and authorization checks for GraphQL resolvers
"""

from typing import TYPE_CHECKING

import strawberry

from ..logging import get_logger
from .errors import NotAuthenticatedError

if TYPE_CHECKING:
    from ..auth.adapters.base import TokenAdapter
    from ..auth.context import AuthContext
    from ..database.models import UserDocument
    from ..database.store import LibraryStore

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> "LibraryStore":
    """Return the document store attached to the request context."""
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("Document store not found in GraphQL context")
    return store


def get_token_adapter_from_info(info: strawberry.Info) -> "TokenAdapter":
    """Return the token adapter attached to the request context."""
    adapter = info.context.get("token_adapter")
    if adapter is None:
        raise RuntimeError("Token adapter not found in GraphQL context")
    return adapter


def get_auth_context_from_info(info: strawberry.Info) -> "AuthContext | None":
    """Return the request's auth context, or None when the context carries none."""
    return info.context.get("auth")


def require_current_user(info: strawberry.Info) -> "UserDocument":
    """
    Return the authenticated user or fail the operation.

    Raises:
        NotAuthenticatedError: If the request has no verified user
    """
    auth_context = get_auth_context_from_info(info)
    if auth_context is None or auth_context.current_user is None:
        logger.warning("Unauthenticated access to protected operation", field=info.field_name)
        raise NotAuthenticatedError()
    return auth_context.current_user
