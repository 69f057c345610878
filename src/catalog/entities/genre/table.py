"""Genre database table model."""

from sqlalchemy import CheckConstraint
from sqlmodel import Field

from src.catalog.entities._base import EntityTable


class GenreTable(EntityTable, table=True):
    """Database persistence model for genres."""

    __tablename__ = "genres"
    __table_args__ = (
        CheckConstraint("length(trim(name)) > 0", name="chk_genre_name"),
    )

    name: str = Field(max_length=100, unique=True)
