"""
Tests for book and author resolvers called directly
"""

import pytest

from library_api.graphql.arguments import AddBookArgs, BooksFilter, EditAuthorArgs
from library_api.graphql.errors import NotAuthenticatedError, UserInputError
from library_api.graphql.resolvers.author import edit_author, resolve_all_authors
from library_api.graphql.resolvers.book import add_book, resolve_all_books


class TestAddBook:
    """Tests for add_book."""

    @pytest.mark.asyncio
    async def test_requires_authentication(self, make_info, store):
        info = make_info(current_user=None)

        with pytest.raises(NotAuthenticatedError):
            await add_book(info, AddBookArgs("Clean Code", "Robert Martin", 2008, ["software"]))

        assert await store.count_books() == 0
        assert await store.count_authors() == 0

    @pytest.mark.asyncio
    async def test_creates_author_on_first_book(self, make_info, store, user):
        info = make_info(current_user=user)

        book = await add_book(info, AddBookArgs("Clean Code", "Robert Martin", 2008, ["software"]))

        assert book.author.name == "Robert Martin"
        assert book.author.born is None
        assert book.title == "Clean Code"
        assert book.genres == ["software"]
        assert await store.count_authors() == 1
        assert await store.count_books() == 1

    @pytest.mark.asyncio
    async def test_reuses_existing_author(self, make_info, store, user):
        existing = await store.insert_author("Robert Martin", born=1952)
        info = make_info(current_user=user)

        book = await add_book(info, AddBookArgs("Clean Code", "Robert Martin", 2008, []))

        assert str(book.author.id) == existing.id
        assert book.author.born == 1952
        assert await store.count_authors() == 1

    @pytest.mark.asyncio
    async def test_short_title_rejected_without_writes(self, make_info, store, user):
        info = make_info(current_user=user)

        with pytest.raises(UserInputError) as exc_info:
            await add_book(info, AddBookArgs("Code", "Robert Martin", 2008, []))

        assert exc_info.value.extensions["code"] == "BAD_USER_INPUT"
        assert exc_info.value.extensions["invalidArgs"] == "Code"
        assert await store.count_books() == 0
        assert await store.count_authors() == 0

    @pytest.mark.asyncio
    async def test_title_of_exactly_five_characters_accepted(self, make_info, store, user):
        info = make_info(current_user=user)

        book = await add_book(info, AddBookArgs("Demons", "Fyodor Dostoevsky", 1872, []))
        short = await add_book(info, AddBookArgs("Idiot", "Fyodor Dostoevsky", 1869, []))

        assert book.title == "Demons"
        assert short.title == "Idiot"

    @pytest.mark.asyncio
    async def test_short_new_author_name_rejected_without_writes(self, make_info, store, user):
        info = make_info(current_user=user)

        with pytest.raises(UserInputError):
            await add_book(info, AddBookArgs("Clean Code", "Bob", 2008, []))

        assert await store.count_books() == 0
        assert await store.count_authors() == 0

    @pytest.mark.asyncio
    async def test_short_existing_author_name_accepted(self, make_info, store, user):
        """Name length is only checked when the author has to be created."""
        await store.insert_author("Poe")
        info = make_info(current_user=user)

        book = await add_book(info, AddBookArgs("The Raven", "Poe", 1845, ["poetry"]))

        assert book.author.name == "Poe"


class TestAllBooks:
    """Tests for resolve_all_books."""

    @pytest.mark.asyncio
    async def test_unknown_author_matches_nothing(self, make_info, store):
        martin = await store.insert_author("Robert Martin")
        await store.insert_book("Clean Code", 2008, martin, ["refactoring"])

        books = await resolve_all_books(make_info(), BooksFilter(author="Nobody Known"))

        assert books == []

    @pytest.mark.asyncio
    async def test_author_and_genre(self, make_info, store):
        martin = await store.insert_author("Robert Martin")
        fowler = await store.insert_author("Martin Fowler")
        await store.insert_book("Clean Code", 2008, martin, ["refactoring"])
        await store.insert_book("Agile software development", 2002, martin, ["agile"])
        await store.insert_book("Refactoring, edition 2", 2018, fowler, ["refactoring"])

        books = await resolve_all_books(
            make_info(), BooksFilter(author="Robert Martin", genre="refactoring")
        )

        assert [book.title for book in books] == ["Clean Code"]
        assert books[0].author.name == "Robert Martin"

    @pytest.mark.asyncio
    async def test_empty_filters_match_every_book(self, make_info, store):
        martin = await store.insert_author("Robert Martin")
        await store.insert_book("Clean Code", 2008, martin, ["refactoring"])

        by_empty_author = await resolve_all_books(make_info(), BooksFilter(author=""))
        by_empty_genre = await resolve_all_books(make_info(), BooksFilter(genre=""))

        assert [book.title for book in by_empty_author] == ["Clean Code"]
        assert [book.title for book in by_empty_genre] == ["Clean Code"]


class TestEditAuthor:
    """Tests for edit_author."""

    @pytest.mark.asyncio
    async def test_requires_authentication(self, make_info, store):
        await store.insert_author("Robert Martin")

        with pytest.raises(NotAuthenticatedError):
            await edit_author(make_info(), EditAuthorArgs(name="Robert Martin", set_born_to=1952))

        assert (await store.find_author_by_name("Robert Martin")).born is None

    @pytest.mark.asyncio
    async def test_unknown_author(self, make_info, store, user):
        with pytest.raises(UserInputError) as exc_info:
            await edit_author(
                make_info(current_user=user), EditAuthorArgs(name="Nobody Known", set_born_to=1900)
            )

        assert exc_info.value.extensions["code"] == "BAD_USER_INPUT"
        assert await store.count_authors() == 0

    @pytest.mark.asyncio
    async def test_sets_birth_year(self, make_info, store, user):
        await store.insert_author("Sandi Metz")

        author = await edit_author(
            make_info(current_user=user), EditAuthorArgs(name="Sandi Metz", set_born_to=1953)
        )

        assert author.name == "Sandi Metz"
        assert author.born == 1953


@pytest.mark.asyncio
async def test_all_authors_returns_every_author(make_info, store):
    await store.insert_author("Robert Martin", born=1952)
    await store.insert_author("Sandi Metz")

    authors = await resolve_all_authors(make_info())

    assert [(a.name, a.born) for a in authors] == [("Robert Martin", 1952), ("Sandi Metz", None)]
