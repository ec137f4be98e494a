"""Token authentication for the Library API."""

from .adapters.base import AuthenticationError, TokenAdapter, TokenClaims
from .context import AuthContext
from .factory import get_auth_adapter
from .middleware import resolve_auth_context

__all__ = [
    "AuthContext",
    "AuthenticationError",
    "TokenAdapter",
    "TokenClaims",
    "get_auth_adapter",
    "resolve_auth_context",
]
