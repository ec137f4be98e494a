from __future__ import annotations

import secrets
from typing import TYPE_CHECKING

import strawberry

from ...config import settings
from ...logging import get_logger
from ..access_control import (
    get_auth_context_from_info,
    get_store_from_info,
    get_token_adapter_from_info,
)
from ..errors import NotAuthenticatedError
from .user import user_from_document

if TYPE_CHECKING:
    from ..arguments import LoginArgs
    from ..types.user import Token, User

logger = get_logger(__name__)


async def resolve_current_user(info: strawberry.Info) -> User | None:
    auth_context = get_auth_context_from_info(info)
    if auth_context is None or auth_context.current_user is None:
        return None
    return user_from_document(auth_context.current_user)


async def login(info: strawberry.Info, args: LoginArgs) -> Token:
    """
    Exchange a username and the shared password for a signed token.

    Passwords are not stored per user: every existing user logs in with the
    configured ``login_password``.

    Raises:
        NotAuthenticatedError: If the user is unknown or the password is wrong
    """
    store = get_store_from_info(info)

    user = await store.find_user_by_username(args.username)
    password_ok = secrets.compare_digest(
        args.password.encode("utf-8"), settings.login_password.encode("utf-8")
    )
    if user is None or not password_ok:
        logger.warning("Login rejected", username=args.username)
        raise NotAuthenticatedError("wrong credentials")

    adapter = get_token_adapter_from_info(info)
    token = await adapter.issue_token(user)

    logger.info("User logged in", user_id=user.id, username=user.username)

    from ..types.user import Token as TokenType

    return TokenType(value=token)
