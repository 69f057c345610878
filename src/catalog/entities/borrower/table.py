"""Borrower database table model."""

from sqlalchemy import CheckConstraint, Column, Text
from sqlmodel import Field

from src.catalog.entities._base import EntityTable


class BorrowerTable(EntityTable, table=True):
    """Database persistence model for borrowers."""

    __tablename__ = "borrowers"
    __table_args__ = (
        CheckConstraint("email LIKE '%_@_%._%'", name="chk_borrower_email"),
        CheckConstraint(
            "length(trim(first_name)) > 0 AND length(trim(last_name)) > 0",
            name="chk_borrower_names",
        ),
    )

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=255, unique=True, index=True)
    phone: str | None = Field(default=None, max_length=20)
    address: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
