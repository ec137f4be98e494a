"""
Sample catalog used to seed a fresh database.

Seeding is idempotent: authors are matched by name and books by title plus
author, so running it twice leaves the collections unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..logging import get_logger
from .store import LibraryStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class SeedAuthor:
    name: str
    born: int | None = None


@dataclass(frozen=True)
class SeedBook:
    title: str
    published: int
    author: str
    genres: list[str] = field(default_factory=list)


SAMPLE_AUTHORS = [
    SeedAuthor("Robert Martin", 1952),
    SeedAuthor("Martin Fowler", 1963),
    SeedAuthor("Fyodor Dostoevsky", 1821),
    SeedAuthor("Joshua Kerievsky"),  # birth year not known
    SeedAuthor("Sandi Metz"),  # birth year not known
]

SAMPLE_BOOKS = [
    SeedBook("Clean Code", 2008, "Robert Martin", ["refactoring"]),
    SeedBook("Agile software development", 2002, "Robert Martin", ["agile", "patterns", "design"]),
    SeedBook("Refactoring, edition 2", 2018, "Martin Fowler", ["refactoring"]),
    SeedBook("Refactoring to patterns", 2008, "Joshua Kerievsky", ["refactoring", "patterns"]),
    SeedBook(
        "Practical Object-Oriented Design, An Agile Primer Using Ruby",
        2012,
        "Sandi Metz",
        ["refactoring", "design"],
    ),
    SeedBook("Crime and punishment", 1866, "Fyodor Dostoevsky", ["classic", "crime"]),
    SeedBook("Demons", 1872, "Fyodor Dostoevsky", ["classic", "revolution"]),
]


async def seed_initial_data(
    store: LibraryStore,
    authors: list[SeedAuthor] | None = None,
    books: list[SeedBook] | None = None,
) -> dict[str, int]:
    """
    Insert the sample authors and books that are not already present.

    Args:
        store: Target document store
        authors: Authors to seed (defaults to SAMPLE_AUTHORS)
        books: Books to seed (defaults to SAMPLE_BOOKS)

    Returns:
        Counts of created authors and books
    """
    authors = SAMPLE_AUTHORS if authors is None else authors
    books = SAMPLE_BOOKS if books is None else books

    created_authors = 0
    created_books = 0

    for seed_author in authors:
        author, created = await store.get_or_create_author(seed_author.name)
        if created:
            created_authors += 1
        if seed_author.born is not None and author.born is None:
            await store.set_author_born(author.id, seed_author.born)

    for seed_book in books:
        author, created = await store.get_or_create_author(seed_book.author)
        if created:
            created_authors += 1
        if await store.book_exists(seed_book.title, author.id):
            logger.debug("Book already seeded", title=seed_book.title)
            continue
        await store.insert_book(
            title=seed_book.title,
            published=seed_book.published,
            author=author,
            genres=seed_book.genres,
        )
        created_books += 1

    logger.info("Seed data applied", authors_created=created_authors, books_created=created_books)
    return {"authors": created_authors, "books": created_books}
