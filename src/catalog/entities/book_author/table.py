"""BookAuthor association table model."""

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field, SQLModel


class BookAuthorTable(SQLModel, table=True):
    """Composite-key link between books and authors.

    Rows go away with either endpoint (ON DELETE CASCADE).
    """

    __tablename__ = "book_authors"

    book_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True
        )
    )
    author_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True
        )
    )
