"""
Root GraphQL mutation definitions
"""

import strawberry

from ..arguments import AddBookArgs, CreateUserArgs, EditAuthorArgs, LoginArgs
from ..types.author import Author
from ..types.book import Book
from ..types.user import Token, User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Catalog mutations
    @strawberry.mutation(name="addBook")
    async def add_book(
        self,
        info: strawberry.Info,
        title: str,
        author: str,
        published: int,
        genres: list[str],
    ) -> Book:
        """Add a book, creating the author if this is their first book."""
        from ..resolvers.book import add_book

        return await add_book(
            info,
            AddBookArgs(title=title, author=author, published=published, genres=genres),
        )

    @strawberry.mutation(name="editAuthor")
    async def edit_author(
        self, info: strawberry.Info, name: str, set_born_to: int
    ) -> Author | None:
        """Set an author's birth year."""
        from ..resolvers.author import edit_author

        return await edit_author(info, EditAuthorArgs(name=name, set_born_to=set_born_to))

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(
        self, info: strawberry.Info, username: str, favorite_genre: str
    ) -> User | None:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(
            info, CreateUserArgs(username=username, favorite_genre=favorite_genre)
        )

    @strawberry.mutation
    async def login(self, info: strawberry.Info, username: str, password: str) -> Token | None:
        """Log in and receive a signed token."""
        from ..resolvers.auth import login

        return await login(info, LoginArgs(username=username, password=password))
