"""
Author GraphQL type definitions
"""

import strawberry


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    name: str
    born: int | None
    id: strawberry.ID

    @strawberry.field
    async def book_count(self, info: strawberry.Info) -> int:
        """Number of books referencing this author."""
        from ..resolvers.author import resolve_author_book_count

        return await resolve_author_book_count(self, info)
