"""Data-access layer for borrowers."""

from sqlmodel import select

from src.catalog.entities._repository import EntityRepository
from src.catalog.entities.borrower.entity import Borrower
from src.catalog.entities.borrower.table import BorrowerTable


class BorrowerRepository(EntityRepository[Borrower, BorrowerTable]):
    entity_cls = Borrower
    table_cls = BorrowerTable
    unique_field = "email"
    # Loans are permanent history, so a borrower with loans stays.
    loan_column = "borrower_id"

    def find_by_email(self, email: str) -> Borrower | None:
        row = self._session.exec(
            select(BorrowerTable).where(BorrowerTable.email == email)
        ).first()
        if row is None:
            return None
        return Borrower.model_validate(row, from_attributes=True)
