"""Base token adapter interface and types."""

from __future__ import annotations

from typing import Protocol, TypedDict

from ...database.models import UserDocument


class TokenClaims(TypedDict):
    """Identity carried inside a signed login token."""

    username: str
    id: str


class TokenAdapter(Protocol):
    """Signs and verifies login tokens."""

    async def verify_token(self, token: str) -> TokenClaims:
        """
        Verify a token and return the embedded identity.

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        ...

    async def issue_token(self, user: UserDocument) -> str:
        """Sign a new token for the given user."""
        ...


class AuthenticationError(Exception):
    """Raised when a presented token cannot be verified."""

    pass
