"""Entity: BookGenre association pair."""

from pydantic import BaseModel, ConfigDict, Field


class BookGenre(BaseModel):
    """A (book, genre) classification. Hashable, so links can be held in sets."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    book_id: int = Field(description="Classified book")
    genre_id: int = Field(description="Genre the book belongs to")
