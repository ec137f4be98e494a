"""
Document store adapter for the library collections.

All reads and writes against MongoDB go through ``LibraryStore``. The store is
constructed once around an async database handle (motor in production,
mongomock-motor in tests) and handed to resolvers through the GraphQL context.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from ..logging import get_logger
from .models import AuthorDocument, PopulatedBook, UserDocument

logger = get_logger(__name__)

AUTHORS_COLLECTION = "authors"
BOOKS_COLLECTION = "books"
USERS_COLLECTION = "users"


def to_object_id(value: str | ObjectId) -> ObjectId | None:
    """Convert a string id to an ObjectId, returning None for malformed ids."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class LibraryStore:
    """Async access to the authors, books and users collections."""

    def __init__(self, database: Any):
        self.database = database
        self.authors = database[AUTHORS_COLLECTION]
        self.books = database[BOOKS_COLLECTION]
        self.users = database[USERS_COLLECTION]

    async def ping(self) -> None:
        """Round-trip to the server. Raises if the store is unreachable."""
        await self.database.command("ping")

    async def ensure_indexes(self) -> None:
        """Create the indexes the collections rely on."""
        await self.authors.create_index([("name", ASCENDING)], unique=True)
        await self.users.create_index([("username", ASCENDING)], unique=True)
        await self.books.create_index([("author", ASCENDING)])
        logger.debug("Store indexes ensured")

    # Counts

    async def count_books(self, author_id: str | None = None) -> int:
        query: dict[str, Any] = {}
        if author_id is not None:
            query["author"] = to_object_id(author_id)
        return await self.books.count_documents(query)

    async def count_authors(self) -> int:
        return await self.authors.count_documents({})

    # Authors

    async def find_author_by_name(self, name: str) -> AuthorDocument | None:
        doc = await self.authors.find_one({"name": name})
        return AuthorDocument.from_mongo(doc) if doc else None

    async def find_authors(self) -> list[AuthorDocument]:
        docs = await self.authors.find({}).to_list(length=None)
        return [AuthorDocument.from_mongo(doc) for doc in docs]

    async def insert_author(self, name: str, born: int | None = None) -> AuthorDocument:
        doc: dict[str, Any] = {"name": name, "born": born}
        result = await self.authors.insert_one(doc)
        return AuthorDocument(id=str(result.inserted_id), name=name, born=born)

    async def get_or_create_author(self, name: str) -> tuple[AuthorDocument, bool]:
        """Return the author with this name, creating it if absent.

        Returns:
            Tuple of (author, created)
        """
        existing = await self.find_author_by_name(name)
        if existing:
            return existing, False

        try:
            author = await self.insert_author(name)
        except DuplicateKeyError:
            # A concurrent request inserted the same name after our lookup
            winner = await self.find_author_by_name(name)
            if winner is None:
                raise
            logger.info("Author created concurrently, reusing existing record", name=name)
            return winner, False

        logger.info("Author created", author_id=author.id, name=name)
        return author, True

    async def set_author_born(self, author_id: str, born: int) -> AuthorDocument | None:
        doc = await self.authors.find_one_and_update(
            {"_id": to_object_id(author_id)},
            {"$set": {"born": born}},
            return_document=ReturnDocument.AFTER,
        )
        return AuthorDocument.from_mongo(doc) if doc else None

    # Books

    async def find_books(
        self, author_id: str | None = None, genre: str | None = None
    ) -> list[PopulatedBook]:
        """Find books matching every given filter, with authors populated."""
        query: dict[str, Any] = {}
        if author_id:
            query["author"] = to_object_id(author_id)
        if genre:
            query["genres"] = {"$all": [genre]}

        docs = await self.books.find(query).to_list(length=None)
        authors = await self._authors_by_id(doc["author"] for doc in docs)

        books = []
        for doc in docs:
            author = authors.get(doc["author"])
            if author is None:
                logger.warning(
                    "Book references a missing author",
                    book_id=str(doc["_id"]),
                    author_id=str(doc["author"]),
                )
                continue
            books.append(PopulatedBook.from_mongo_with_author(doc, author))
        return books

    async def insert_book(
        self,
        title: str,
        published: int,
        author: AuthorDocument,
        genres: Iterable[str],
    ) -> PopulatedBook:
        # Genres are a set; keep first-seen order
        unique_genres = list(dict.fromkeys(genres))
        doc: dict[str, Any] = {
            "title": title,
            "published": published,
            "author": to_object_id(author.id),
            "genres": unique_genres,
        }
        result = await self.books.insert_one(doc)
        doc["_id"] = result.inserted_id
        return PopulatedBook.from_mongo_with_author(doc, author)

    async def book_exists(self, title: str, author_id: str) -> bool:
        doc = await self.books.find_one({"title": title, "author": to_object_id(author_id)})
        return doc is not None

    async def _authors_by_id(self, ids: Iterable[ObjectId]) -> dict[ObjectId, AuthorDocument]:
        unique_ids = list(dict.fromkeys(ids))
        if not unique_ids:
            return {}
        docs = await self.authors.find({"_id": {"$in": unique_ids}}).to_list(length=None)
        return {doc["_id"]: AuthorDocument.from_mongo(doc) for doc in docs}

    # Users

    async def insert_user(self, username: str, favorite_genre: str | None) -> UserDocument:
        """Persist a user.

        Raises:
            DuplicateKeyError: If the username is already taken
        """
        doc: dict[str, Any] = {"username": username, "favoriteGenre": favorite_genre}
        result = await self.users.insert_one(doc)
        return UserDocument(
            id=str(result.inserted_id), username=username, favorite_genre=favorite_genre
        )

    async def find_user_by_username(self, username: str) -> UserDocument | None:
        doc = await self.users.find_one({"username": username})
        return UserDocument.from_mongo(doc) if doc else None

    async def find_user_by_id(self, user_id: str) -> UserDocument | None:
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        doc = await self.users.find_one({"_id": object_id})
        return UserDocument.from_mongo(doc) if doc else None
