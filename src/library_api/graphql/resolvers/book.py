from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..access_control import get_store_from_info, require_current_user
from ..errors import UserInputError
from .author import author_from_document, validate_author_name

if TYPE_CHECKING:
    from ...database.models import PopulatedBook
    from ..arguments import AddBookArgs, BooksFilter
    from ..types.book import Book

logger = get_logger(__name__)

MIN_TITLE_LENGTH = 5


def book_from_document(doc: PopulatedBook) -> Book:
    from ..types.book import Book as BookType

    return BookType(
        id=strawberry.ID(doc.id),
        title=doc.title,
        published=doc.published,
        author=author_from_document(doc.author),
        genres=list(doc.genres),
    )


# Query resolvers
async def resolve_book_count(info: strawberry.Info) -> int:
    store = get_store_from_info(info)
    return await store.count_books()


async def resolve_all_books(info: strawberry.Info, filters: BooksFilter) -> list[Book]:
    """
    Resolve books matching every given filter, authors populated.

    An author filter naming an unknown author matches nothing. Empty filters
    are ignored.
    """
    store = get_store_from_info(info)

    author_id = None
    if filters.author:
        author = await store.find_author_by_name(filters.author)
        if author is None:
            return []
        author_id = author.id

    books = await store.find_books(author_id=author_id, genre=filters.genre)
    return [book_from_document(book) for book in books]


# Mutations
async def add_book(info: strawberry.Info, args: AddBookArgs) -> Book:
    """
    Add a book, creating its author on first use. Requires authentication.

    All arguments are validated before anything is written.

    Raises:
        NotAuthenticatedError: If the request has no current user
        UserInputError: If the title, or the name of a new author, is too short
    """
    user = require_current_user(info)
    store = get_store_from_info(info)

    if len(args.title) < MIN_TITLE_LENGTH:
        logger.warning("Book title too short", title=args.title)
        raise UserInputError(
            f"Book title must be at least {MIN_TITLE_LENGTH} characters long",
            invalid_args=args.title,
        )

    author = await store.find_author_by_name(args.author)
    if author is None:
        try:
            validate_author_name(args.author)
        except UserInputError:
            logger.warning("Author name too short", name=args.author)
            raise
        author, _ = await store.get_or_create_author(args.author)

    book = await store.insert_book(
        title=args.title,
        published=args.published,
        author=author,
        genres=args.genres,
    )

    logger.info(
        "Book added",
        book_id=book.id,
        title=book.title,
        author_id=author.id,
        user_id=user.id,
    )
    return book_from_document(book)
