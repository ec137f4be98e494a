"""JWT adapter for self-issued login tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError

from ...database.models import UserDocument
from ...logging import get_logger
from .base import AuthenticationError, TokenClaims

logger = get_logger(__name__)


class JWTAuthAdapter:
    """Signs and verifies HMAC JWTs carrying ``{username, id}``."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        token_expiry_hours: int | None = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.token_expiry_hours = token_expiry_hours

    async def verify_token(self, token: str) -> TokenClaims:
        """Verify a JWT and return its identity claims."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": True, "verify_iat": True},
            )
        except InvalidTokenError as e:
            logger.warning("JWT token validation failed", error=str(e))
            raise AuthenticationError("Invalid token") from e

        user_id = payload.get("id")
        username = payload.get("username")
        if not user_id or not username:
            raise AuthenticationError("Token is missing 'id' or 'username' claim")

        return TokenClaims(username=str(username), id=str(user_id))

    async def issue_token(self, user: UserDocument) -> str:
        """Issue a new JWT for a user."""
        now = datetime.now(UTC)

        payload: dict[str, Any] = {
            "username": user.username,
            "id": user.id,
            "iat": now,
        }
        if self.token_expiry_hours:
            payload["exp"] = now + timedelta(hours=self.token_expiry_hours)

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
