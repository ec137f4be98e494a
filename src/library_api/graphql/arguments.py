"""
Typed argument records passed from root fields to resolvers
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BooksFilter:
    author: str | None = None
    genre: str | None = None


@dataclass(frozen=True)
class AddBookArgs:
    title: str
    author: str
    published: int
    genres: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class EditAuthorArgs:
    name: str
    set_born_to: int


@dataclass(frozen=True)
class CreateUserArgs:
    username: str
    favorite_genre: str


@dataclass(frozen=True)
class LoginArgs:
    username: str
    password: str
