"""Loan database table model."""

from datetime import date

from sqlalchemy import CheckConstraint, Index
from sqlmodel import Field

from src.catalog.entities._base import EntityTable


class LoanTable(EntityTable, table=True):
    """Database persistence model for loans.

    The book and borrower foreign keys carry no ON DELETE action, so the
    database refuses to drop a referenced book or borrower.
    """

    __tablename__ = "loans"
    __table_args__ = (
        CheckConstraint("loan_date <= due_date", name="chk_loan_dates"),
        CheckConstraint(
            "return_date IS NULL OR return_date >= loan_date", name="chk_return_date"
        ),
        Index("idx_loan_dates", "loan_date", "due_date"),
    )

    book_id: int = Field(foreign_key="books.id", index=True)
    borrower_id: int = Field(foreign_key="borrowers.id", index=True)
    loan_date: date
    due_date: date
    return_date: date | None = None
