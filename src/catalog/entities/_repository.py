"""Shared data-access behaviour for the catalog entity repositories."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from loguru import logger
from sqlalchemy import exc as sa_exc
from sqlmodel import Session, SQLModel, func, select

from src.catalog.core.errors import (
    IntegrityError,
    NotFoundError,
    UniqueViolationError,
    ValidationError,
)
from src.catalog.entities._base import Entity, EntityTable, build_entity

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)


def is_unique_violation(error: sa_exc.IntegrityError) -> bool:
    """Whether a database integrity failure came from a UNIQUE/PK constraint."""
    message = str(error.orig).lower()
    return "unique" in message or "duplicate" in message


class EntityRepository(Generic[EntityT, TableT]):
    """CRUD repository over one entity table.

    Subclasses set ``entity_cls``/``table_cls`` and, where the table has one,
    ``unique_field``. ``loan_column`` names the loans column that references
    the entity; such rows cannot be deleted while any loan points at them.

    Writes run inside a savepoint on the caller's session so a rejected write
    leaves the surrounding unit of work usable; committing is the caller's job.
    """

    entity_cls: type[EntityT]
    table_cls: type[TableT]
    unique_field: str | None = None
    loan_column: str | None = None

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def entity_name(self) -> str:
        return self.entity_cls.__name__

    def create(self, **fields: Any) -> int:
        """Validate and insert a new row, returning its id."""
        if "id" in fields:
            raise ValidationError("id", "is assigned by the store")
        entity = build_entity(self.entity_cls, fields)
        row = self.table_cls(**entity.model_dump(exclude={"id"}))
        self._write(row, entity)
        logger.info("Created {} {}", self.entity_name, row.id)
        return row.id

    def get(self, entity_id: int) -> EntityT:
        return self.entity_cls.model_validate(self._get_row(entity_id), from_attributes=True)

    def list(self) -> list[EntityT]:
        rows = self._session.exec(select(self.table_cls).order_by(self.table_cls.id)).all()
        return [self.entity_cls.model_validate(row, from_attributes=True) for row in rows]

    def update(self, entity_id: int, **fields: Any) -> EntityT:
        """Merge ``fields`` over the stored row, re-validate and persist."""
        if "id" in fields:
            raise ValidationError("id", "cannot be changed")
        row = self._get_row(entity_id)
        current = self.entity_cls.model_validate(row, from_attributes=True)
        entity = build_entity(self.entity_cls, {**current.model_dump(), **fields})

        def apply() -> None:
            for name, value in entity.model_dump(exclude={"id"}).items():
                setattr(row, name, value)

        self._write(row, entity, apply)
        logger.debug("Updated {} {} fields={}", self.entity_name, entity_id, sorted(fields))
        return entity

    def delete(self, entity_id: int) -> None:
        """Delete a row together with its dependent association rows."""
        row = self._get_row(entity_id)
        self._reject_if_loaned(entity_id)
        try:
            with self._session.begin_nested():
                removed = self._delete_dependents(entity_id)
                self._session.flush()
                self._session.delete(row)
                self._session.flush()
        except sa_exc.IntegrityError as exc:
            # A loan opened after the check above trips the foreign key instead
            if self.loan_column is None:
                raise
            dependents = self._count_loans(entity_id)
            logger.warning(
                "Rejected delete of {} {}: referenced by {} loan(s)",
                self.entity_name,
                entity_id,
                dependents,
            )
            raise IntegrityError(self.entity_name, entity_id, dependents) from exc
        logger.info(
            "Deleted {} {} (removed {} association rows)", self.entity_name, entity_id, removed
        )

    def _get_row(self, entity_id: int) -> TableT:
        row = self._session.get(self.table_cls, entity_id)
        if row is None:
            raise NotFoundError(self.entity_name, entity_id)
        return row

    def _write(
        self, row: TableT, entity: EntityT, apply: Callable[[], None] | None = None
    ) -> None:
        try:
            with self._session.begin_nested():
                if apply is None:
                    self._session.add(row)
                else:
                    apply()
                self._session.flush()
        except sa_exc.IntegrityError as exc:
            if self.unique_field is None or not is_unique_violation(exc):
                raise
            value = getattr(entity, self.unique_field)
            logger.warning(
                "Rejected {} write: {}={!r} already exists",
                self.entity_name,
                self.unique_field,
                value,
            )
            raise UniqueViolationError(self.entity_name, self.unique_field, value) from exc

    def _delete_dependents(self, entity_id: int) -> int:
        """Remove association rows referencing ``entity_id``; returns the count."""
        return 0

    def _delete_links(self, link_table: type[SQLModel], column: str, entity_id: int) -> int:
        statement = select(link_table).where(getattr(link_table, column) == entity_id)
        links = self._session.exec(statement).all()
        for link in links:
            self._session.delete(link)
        return len(links)

    def _count_loans(self, entity_id: int) -> int:
        from src.catalog.entities.loan.table import LoanTable

        statement = select(func.count(LoanTable.id)).where(
            getattr(LoanTable, self.loan_column) == entity_id
        )
        return self._session.exec(statement).one()

    def _reject_if_loaned(self, entity_id: int) -> None:
        """Raise IntegrityError when loans reference ``entity_id``."""
        if self.loan_column is None:
            return
        dependents = self._count_loans(entity_id)
        if dependents:
            logger.warning(
                "Rejected delete of {} {}: referenced by {} loan(s)",
                self.entity_name,
                entity_id,
                dependents,
            )
            raise IntegrityError(self.entity_name, entity_id, dependents)
