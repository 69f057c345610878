"""Entity: Book."""

from typing import Any

from pydantic import Field, field_validator

from src.catalog.core.validation import (
    require_non_blank,
    validate_isbn,
    validate_publication_year,
)
from src.catalog.entities._base import Entity


class Book(Entity):
    """Book entity representing a catalogued title.

    The ISBN is a 13-digit ISBN-13 and is unique across the store; the
    publication year, when known, is no earlier than 1000.
    """

    title: str = Field(max_length=255, description="Title of the book")
    isbn: str = Field(description="International Standard Book Number (ISBN-13)")
    publication_year: int | None = Field(default=None, description="Year published")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return require_non_blank("title", value)

    @field_validator("isbn")
    @classmethod
    def check_isbn(cls, value: str) -> str:
        return validate_isbn(value)

    @field_validator("publication_year")
    @classmethod
    def check_publication_year(cls, value: int | None) -> int | None:
        return validate_publication_year(value)

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.isbn == other.isbn
            and self.publication_year == other.publication_year
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title, self.isbn, self.publication_year))
