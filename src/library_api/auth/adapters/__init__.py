"""Token adapters."""

from .base import AuthenticationError, TokenAdapter, TokenClaims
from .jwt import JWTAuthAdapter

__all__ = [
    "AuthenticationError",
    "JWTAuthAdapter",
    "TokenAdapter",
    "TokenClaims",
]
