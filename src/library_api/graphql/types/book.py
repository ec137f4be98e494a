"""
Book GraphQL type definitions
"""

import strawberry

from .author import Author


@strawberry.type
class Book:
    """Book type for GraphQL API. ``author`` is always fully resolved."""

    title: str
    published: int
    author: Author
    genres: list[str]
    id: strawberry.ID
