"""Factory for the token adapter based on configuration."""

from __future__ import annotations

from ..config import settings
from .adapters.base import TokenAdapter
from .adapters.jwt import JWTAuthAdapter


def get_auth_adapter(secret_key: str | None = None) -> TokenAdapter:
    """Create the configured token adapter.

    Raises:
        ValueError: If no signing secret is configured
    """
    secret = secret_key or settings.jwt_secret
    if not secret:
        raise ValueError("JWT secret key is required. Set LIBRARY_JWT_SECRET.")

    return JWTAuthAdapter(
        secret_key=secret,
        algorithm=settings.jwt_algorithm,
        token_expiry_hours=settings.token_expiry_hours,
    )
