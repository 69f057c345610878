"""Entity: Author."""

from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from src.catalog.core.validation import require_non_blank
from src.catalog.entities._base import Entity


class Author(Entity):
    """Author entity representing a person credited on one or more books."""

    first_name: str = Field(max_length=100, description="Author's first name")
    last_name: str = Field(max_length=100, description="Author's last name")
    nationality: str | None = Field(
        default=None, max_length=50, description="Author's nationality"
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def names_not_blank(cls, value: str, info: ValidationInfo) -> str:
        return require_non_blank(info.field_name, value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __eq__(self, other: Any) -> bool:
        """Compare authors by business attributes."""
        if not isinstance(other, Author):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.nationality == other.nationality
        )

    def __hash__(self) -> int:
        return hash((self.id, self.first_name, self.last_name, self.nationality))
