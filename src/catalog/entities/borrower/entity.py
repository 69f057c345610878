"""Entity: Borrower."""

from pydantic import Field, ValidationInfo, field_validator

from src.catalog.core.validation import require_non_blank, validate_email
from src.catalog.entities._base import Entity


class Borrower(Entity):
    """Library member who borrows books."""

    first_name: str = Field(max_length=100, description="Borrower's first name")
    last_name: str = Field(max_length=100, description="Borrower's last name")
    email: str = Field(max_length=255, description="Borrower's email, unique")
    phone: str | None = Field(default=None, max_length=20, description="Phone number")
    address: str | None = Field(default=None, description="Postal address")

    @field_validator("first_name", "last_name")
    @classmethod
    def names_not_blank(cls, value: str, info: ValidationInfo) -> str:
        return require_non_blank(info.field_name, value)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return validate_email(value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
