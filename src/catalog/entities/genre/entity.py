"""Entity: Genre."""

from typing import Any

from pydantic import Field, field_validator

from src.catalog.core.validation import require_non_blank
from src.catalog.entities._base import Entity


class Genre(Entity):
    """Genre entity; names are unique across the catalog."""

    name: str = Field(max_length=100, description="Genre name")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return require_non_blank("name", value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Genre):
            return False
        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.id, self.name))
