"""
User and token GraphQL type definitions
"""

import strawberry


@strawberry.type
class User:
    """User type for GraphQL API."""

    username: str
    favorite_genre: str | None
    id: strawberry.ID


@strawberry.type
class Token:
    """Signed login token."""

    value: str
