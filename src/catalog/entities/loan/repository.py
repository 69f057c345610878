"""Loan ledger: the append-mostly record of borrowing events."""

from datetime import date

from loguru import logger
from sqlmodel import Session, col, select

from src.catalog.core.errors import NotFoundError, ValidationError
from src.catalog.entities._base import build_entity
from src.catalog.entities.book.table import BookTable
from src.catalog.entities.borrower.table import BorrowerTable
from src.catalog.entities.loan.entity import Loan
from src.catalog.entities.loan.table import LoanTable


class LoanLedger:
    """Data-access layer for loans.

    Loans are never deleted. The only mutation after ``borrow`` is the single
    transition of ``return_date`` from unset to set in ``return_book``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def borrow(
        self,
        book_id: int,
        borrower_id: int,
        loan_date: date | str,
        due_date: date | str,
    ) -> int:
        """Open a loan and return its id."""
        loan = build_entity(
            Loan,
            {
                "book_id": book_id,
                "borrower_id": borrower_id,
                "loan_date": loan_date,
                "due_date": due_date,
            },
        )
        self._require(BookTable, "Book", book_id)
        self._require(BorrowerTable, "Borrower", borrower_id)

        row = LoanTable(**loan.model_dump(exclude={"id"}))
        with self._session.begin_nested():
            self._session.add(row)
            self._session.flush()
        logger.info(
            "Opened loan {} (book={}, borrower={}, due {})",
            row.id,
            book_id,
            borrower_id,
            loan.due_date,
        )
        return row.id

    def return_book(self, loan_id: int, return_date: date | str) -> Loan:
        """Close a loan. Closing an already closed loan is rejected."""
        if return_date is None:
            raise ValidationError("return_date", "is required")
        row = self._get_row(loan_id)
        if row.return_date is not None:
            logger.warning("Rejected return of loan {}: already closed", loan_id)
            raise ValidationError(
                "return_date", f"loan {loan_id} was already returned on {row.return_date}"
            )

        current = Loan.model_validate(row, from_attributes=True)
        loan = build_entity(Loan, {**current.model_dump(), "return_date": return_date})
        with self._session.begin_nested():
            row.return_date = loan.return_date
            self._session.flush()
        logger.info("Closed loan {} on {}", loan_id, loan.return_date)
        return loan

    def get(self, loan_id: int) -> Loan:
        return Loan.model_validate(self._get_row(loan_id), from_attributes=True)

    def active_loans(self) -> list[Loan]:
        """Loans not yet returned."""
        return self._query(col(LoanTable.return_date).is_(None))

    def overdue_loans(self, as_of: date) -> list[Loan]:
        """Open loans whose due date is strictly before ``as_of``."""
        return self._query(col(LoanTable.return_date).is_(None), LoanTable.due_date < as_of)

    def loans_for_borrower(self, borrower_id: int) -> list[Loan]:
        self._require(BorrowerTable, "Borrower", borrower_id)
        return self._query(LoanTable.borrower_id == borrower_id)

    def loans_for_book(self, book_id: int) -> list[Loan]:
        self._require(BookTable, "Book", book_id)
        return self._query(LoanTable.book_id == book_id)

    def history(self, book_id: int) -> list[Loan]:
        """Every loan of a book, oldest first."""
        return self.loans_for_book(book_id)

    def _query(self, *criteria) -> list[Loan]:
        statement = (
            select(LoanTable).where(*criteria).order_by(LoanTable.loan_date, LoanTable.id)
        )
        return [
            Loan.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        ]

    def _get_row(self, loan_id: int) -> LoanTable:
        row = self._session.get(LoanTable, loan_id)
        if row is None:
            raise NotFoundError("Loan", loan_id)
        return row

    def _require(self, table, name: str, entity_id: int) -> None:
        if self._session.get(table, entity_id) is None:
            raise NotFoundError(name, entity_id)
