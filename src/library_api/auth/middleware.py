"""Resolve the authenticated user for an incoming request."""

from __future__ import annotations

from ..database.store import LibraryStore
from ..logging import get_logger, set_user_context
from .adapters.base import TokenAdapter
from .context import AuthContext

logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "


async def resolve_auth_context(
    authorization: str | None,
    store: LibraryStore,
    adapter: TokenAdapter,
) -> AuthContext:
    """
    Build the AuthContext for a request from its Authorization header.

    - No header, or a header without the ``Bearer `` prefix: anonymous.
    - Valid bearer token: the user named by the token's ``id`` claim.
    - Invalid bearer token: ``AuthenticationError`` propagates to the caller.

    Args:
        authorization: Raw Authorization header value
        store: Document store used to load the user
        adapter: Token adapter holding the signing secret

    Returns:
        AuthContext, anonymous unless a valid token names an existing user
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return AuthContext()

    token = authorization[len(BEARER_PREFIX) :]

    claims = await adapter.verify_token(token)

    user = await store.find_user_by_id(claims["id"])
    if user is None:
        logger.info("Token names an unknown user", user_id=claims["id"])
        return AuthContext()

    set_user_context(user.id)
    logger.debug("Request authenticated", user_id=user.id, username=user.username)
    return AuthContext(current_user=user, token=token)
