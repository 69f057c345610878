"""Entity: BookAuthor association pair."""

from pydantic import BaseModel, ConfigDict, Field


class BookAuthor(BaseModel):
    """A (book, author) credit. Hashable, so links can be held in sets."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    book_id: int = Field(description="Credited book")
    author_id: int = Field(description="Credited author")
