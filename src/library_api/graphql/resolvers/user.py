from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from pymongo.errors import PyMongoError

from ...logging import get_logger
from ..access_control import get_store_from_info
from ..errors import UserInputError

if TYPE_CHECKING:
    from ...database.models import UserDocument
    from ..arguments import CreateUserArgs
    from ..types.user import User

logger = get_logger(__name__)


def user_from_document(doc: UserDocument) -> User:
    from ..types.user import User as UserType

    return UserType(
        id=strawberry.ID(doc.id),
        username=doc.username,
        favorite_genre=doc.favorite_genre,
    )


async def create_user(info: strawberry.Info, args: CreateUserArgs) -> User:
    """
    Create a user.

    Raises:
        UserInputError: If the user cannot be persisted (e.g. duplicate username)
    """
    store = get_store_from_info(info)

    try:
        user = await store.insert_user(args.username, args.favorite_genre)
    except PyMongoError as e:
        logger.warning("Creating user failed", username=args.username, error=str(e))
        raise UserInputError("Creating the user failed", invalid_args=args.username, cause=e) from e

    logger.info("User created", user_id=user.id, username=user.username)
    return user_from_document(user)
