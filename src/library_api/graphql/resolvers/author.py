from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..access_control import get_store_from_info, require_current_user
from ..errors import UserInputError

if TYPE_CHECKING:
    from ...database.models import AuthorDocument
    from ..arguments import EditAuthorArgs
    from ..types.author import Author

logger = get_logger(__name__)

MIN_AUTHOR_NAME_LENGTH = 4


def author_from_document(doc: AuthorDocument) -> Author:
    from ..types.author import Author as AuthorType

    return AuthorType(id=strawberry.ID(doc.id), name=doc.name, born=doc.born)


def validate_author_name(name: str) -> None:
    if len(name) < MIN_AUTHOR_NAME_LENGTH:
        raise UserInputError(
            f"Author name must be at least {MIN_AUTHOR_NAME_LENGTH} characters long",
            invalid_args=name,
        )


# Query resolvers
async def resolve_author_count(info: strawberry.Info) -> int:
    store = get_store_from_info(info)
    return await store.count_authors()


async def resolve_all_authors(info: strawberry.Info) -> list[Author]:
    """
    Resolve every author.

    ``bookCount`` is filled in per author by the field resolver, one count
    query per author.
    """
    store = get_store_from_info(info)
    authors = await store.find_authors()
    return [author_from_document(author) for author in authors]


# Author field resolvers
async def resolve_author_book_count(author: Author, info: strawberry.Info) -> int:
    store = get_store_from_info(info)
    return await store.count_books(author_id=str(author.id))


# Mutations
async def edit_author(info: strawberry.Info, args: EditAuthorArgs) -> Author:
    """
    Set an existing author's birth year. Requires authentication.

    Raises:
        NotAuthenticatedError: If the request has no current user
        UserInputError: If no author has the given name
    """
    user = require_current_user(info)
    store = get_store_from_info(info)

    author = await store.find_author_by_name(args.name)
    if author is None:
        logger.warning("Edit of unknown author rejected", name=args.name)
        raise UserInputError("Author not found", invalid_args=args.name)

    updated = await store.set_author_born(author.id, args.set_born_to)
    if updated is None:
        # Deleted between lookup and update
        raise UserInputError("Author not found", invalid_args=args.name)

    logger.info(
        "Author birth year updated",
        author_id=updated.id,
        born=updated.born,
        user_id=user.id,
    )
    return author_from_document(updated)
