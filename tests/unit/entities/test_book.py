"""Unit tests for the book entity package."""

import pytest

from src.catalog.core.errors import (
    IntegrityError,
    NotFoundError,
    UniqueViolationError,
    ValidationError,
)
from src.catalog.entities import Book, BookRepository


def _hobbit(**overrides):
    fields = {"title": "The Hobbit", "isbn": "9780345339683", "publication_year": 1937}
    fields.update(overrides)
    return fields


class TestBook:
    def test_book_creation(self):
        book = Book(**_hobbit())

        assert book.title == "The Hobbit"
        assert book.publication_year == 1937

    def test_publication_year_is_optional(self):
        assert Book(**_hobbit(publication_year=None)).publication_year is None


class TestBookRepository:
    """Test BookRepository against an in-memory database."""

    def test_create_and_get(self, session):
        repo = BookRepository(session)

        book_id = repo.create(**_hobbit())

        assert repo.get(book_id) == Book(id=book_id, **_hobbit())

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"isbn": "12345"}, "isbn"),
            ({"isbn": "978034533968X"}, "isbn"),
            ({"isbn": "\u0669" * 13}, "isbn"),
            ({"publication_year": 999}, "publication_year"),
            ({"title": "  "}, "title"),
            ({"title": "x" * 256}, "title"),
        ],
    )
    def test_invalid_fields_are_rejected(self, session, overrides, field):
        repo = BookRepository(session)

        with pytest.raises(ValidationError) as exc_info:
            repo.create(**_hobbit(**overrides))

        assert exc_info.value.field == field
        assert repo.list() == []

    def test_duplicate_isbn_is_rejected(self, session):
        repo = BookRepository(session)
        repo.create(**_hobbit())

        with pytest.raises(UniqueViolationError) as exc_info:
            repo.create(**_hobbit(title="The Hobbit (reprint)"))

        assert exc_info.value.field == "isbn"
        assert exc_info.value.value == "9780345339683"

    def test_find_by_isbn(self, session):
        repo = BookRepository(session)
        book_id = repo.create(**_hobbit())

        assert repo.find_by_isbn("9780345339683").id == book_id
        assert repo.find_by_isbn("9780000000000") is None

    def test_search_by_title_is_case_insensitive(self, session):
        repo = BookRepository(session)
        repo.create(**_hobbit())
        repo.create(title="The Lord of the Rings", isbn="9780618053267")
        repo.create(title="1984", isbn="9780451524935")

        titles = [book.title for book in repo.search_by_title("the")]

        assert titles == ["The Hobbit", "The Lord of the Rings"]
        assert repo.search_by_title("dune") == []

    def test_search_by_title_treats_wildcards_literally(self, session):
        """``%`` and ``_`` in the fragment match only themselves."""
        repo = BookRepository(session)
        repo.create(**_hobbit())
        repo.create(title="100% Wolf", isbn="9780141374680")

        assert [book.title for book in repo.search_by_title("%")] == ["100% Wolf"]
        assert repo.search_by_title("_") == []
        assert [book.title for book in repo.search_by_title("0% w")] == ["100% Wolf"]

    def test_update_isbn(self, session):
        repo = BookRepository(session)
        book_id = repo.create(**_hobbit())

        updated = repo.update(book_id, isbn="9780261102217")

        assert updated.isbn == "9780261102217"
        assert repo.find_by_isbn("9780345339683") is None

    def test_delete_unloaned_book(self, session):
        repo = BookRepository(session)
        book_id = repo.create(**_hobbit())

        repo.delete(book_id)

        with pytest.raises(NotFoundError):
            repo.get(book_id)

    def test_delete_loaned_book_is_rejected(self, seeded_store, seeded):
        """A book with loan history cannot be deleted."""
        book_id = seeded.books["Pride and Prejudice"]

        with pytest.raises(IntegrityError) as exc_info:
            seeded_store.books.delete(book_id)

        assert exc_info.value.entity == "Book"
        assert exc_info.value.dependents == 2
        assert seeded_store.books.get(book_id).title == "Pride and Prejudice"
