"""Book database table model."""

from sqlalchemy import CheckConstraint
from sqlmodel import Field

from src.catalog.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books."""

    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("length(isbn) = 13", name="chk_isbn_length"),
        CheckConstraint(
            "publication_year IS NULL OR publication_year >= 1000",
            name="chk_publication_year",
        ),
    )

    title: str = Field(max_length=255, index=True)
    isbn: str = Field(max_length=13, unique=True, index=True)
    publication_year: int | None = None
