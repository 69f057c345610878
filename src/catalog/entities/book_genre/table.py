"""BookGenre association table model."""

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field, SQLModel


class BookGenreTable(SQLModel, table=True):
    """Composite-key link between books and genres.

    Rows go away with either endpoint (ON DELETE CASCADE).
    """

    __tablename__ = "book_genres"

    book_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True
        )
    )
    genre_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True
        )
    )
