"""
Typed GraphQL errors raised by resolvers
"""

from typing import Any

from graphql import GraphQLError

BAD_USER_INPUT = "BAD_USER_INPUT"
UNAUTHENTICATED = "UNAUTHENTICATED"


class UserInputError(GraphQLError):
    """Argument failed validation, or the write it asked for could not be persisted."""

    def __init__(
        self,
        message: str,
        invalid_args: Any = None,
        cause: Exception | None = None,
    ):
        extensions: dict[str, Any] = {"code": BAD_USER_INPUT}
        if invalid_args is not None:
            extensions["invalidArgs"] = invalid_args
        if cause is not None:
            extensions["error"] = str(cause)
        super().__init__(message, extensions=extensions)


class NotAuthenticatedError(GraphQLError):
    """Operation needs a logged-in user, or login credentials were rejected."""

    def __init__(self, message: str = "not authenticated"):
        super().__init__(message, extensions={"code": UNAUTHENTICATED})
