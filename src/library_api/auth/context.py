"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass

from ..database.models import UserDocument


@dataclass
class AuthContext:
    """Runtime authentication context for a request."""

    current_user: UserDocument | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        """Check if the request carries a verified user."""
        return self.current_user is not None
