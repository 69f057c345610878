"""Author database table model."""

from sqlalchemy import CheckConstraint
from sqlmodel import Field

from src.catalog.entities._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors."""

    __tablename__ = "authors"
    __table_args__ = (
        CheckConstraint(
            "length(trim(first_name)) > 0 AND length(trim(last_name)) > 0",
            name="chk_author_names",
        ),
    )

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100, index=True)
    nationality: str | None = Field(default=None, max_length=50)
