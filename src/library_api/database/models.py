"""
Document models for the library collections
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


class AuthorDocument(BaseModel):
    """Author as stored in the ``authors`` collection."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    born: int | None = None

    @classmethod
    def from_mongo(cls, doc: Mapping[str, Any]) -> AuthorDocument:
        return cls(id=str(doc["_id"]), name=doc["name"], born=doc.get("born"))


class BookDocument(BaseModel):
    """Book as stored in the ``books`` collection, author kept as a reference."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    published: int
    author_id: str
    genres: list[str] = []

    @classmethod
    def from_mongo(cls, doc: Mapping[str, Any]) -> BookDocument:
        return cls(
            id=str(doc["_id"]),
            title=doc["title"],
            published=doc["published"],
            author_id=str(doc["author"]),
            genres=list(doc.get("genres") or []),
        )


class PopulatedBook(BookDocument):
    """Book with its author reference replaced by the full author document."""

    author: AuthorDocument

    @classmethod
    def from_mongo_with_author(
        cls, doc: Mapping[str, Any], author: AuthorDocument
    ) -> PopulatedBook:
        return cls(
            id=str(doc["_id"]),
            title=doc["title"],
            published=doc["published"],
            author_id=str(doc["author"]),
            genres=list(doc.get("genres") or []),
            author=author,
        )


class UserDocument(BaseModel):
    """User as stored in the ``users`` collection."""

    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    favorite_genre: str | None = None

    @classmethod
    def from_mongo(cls, doc: Mapping[str, Any]) -> UserDocument:
        return cls(
            id=str(doc["_id"]),
            username=doc["username"],
            favorite_genre=doc.get("favoriteGenre"),
        )
