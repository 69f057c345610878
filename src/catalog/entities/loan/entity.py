"""Entity: Loan."""

from datetime import date

from pydantic import Field, model_validator

from src.catalog.core.validation import validate_loan_dates, validate_return_date
from src.catalog.entities._base import Entity


class Loan(Entity):
    """One borrowing of one book by one borrower.

    A loan is opened with ``return_date`` unset and closed exactly once by
    setting it. The other fields never change after creation.
    """

    book_id: int = Field(description="Borrowed book")
    borrower_id: int = Field(description="Borrowing member")
    loan_date: date = Field(description="Date the book was borrowed")
    due_date: date = Field(description="Date the book is due back")
    return_date: date | None = Field(
        default=None, description="Date the book came back, unset while on loan"
    )

    @model_validator(mode="after")
    def dates_in_order(self) -> "Loan":
        validate_loan_dates(self.loan_date, self.due_date)
        validate_return_date(self.loan_date, self.return_date)
        return self

    @property
    def is_open(self) -> bool:
        return self.return_date is None
