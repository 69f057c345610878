"""Shared behaviour for the book association repositories.

An association row is a composite-key pair ``(book_id, other_id)``. Both
endpoints must exist before a pair can be linked, and each pair exists at
most once (enforced by the composite primary key).
"""

from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import BaseModel
from sqlalchemy import exc as sa_exc
from sqlmodel import Session, SQLModel, select

from src.catalog.core.errors import DuplicateLinkError, NotFoundError
from src.catalog.entities.book.entity import Book
from src.catalog.entities.book.table import BookTable


class LinkRepository:
    """Link/unlink/list operations over one association table.

    Subclasses name the association table, its pair value type, and the
    non-book endpoint (table, entity and link column).
    """

    link_table: type[SQLModel]
    pair_cls: type[BaseModel]
    other_table: type[SQLModel]
    other_entity: type[BaseModel]
    other_column: str

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def link_name(self) -> str:
        return self.pair_cls.__name__

    def link(self, book_id: int, other_id: int) -> None:
        self._require(BookTable, book_id)
        self._require(self.other_table, other_id)
        pair = (book_id, other_id)
        if self._session.get(self.link_table, pair) is not None:
            raise DuplicateLinkError(self.link_name, pair)

        row = self.link_table(**{"book_id": book_id, self.other_column: other_id})
        try:
            with self._session.begin_nested():
                self._session.add(row)
                self._session.flush()
        except sa_exc.IntegrityError as exc:
            logger.warning("Rejected duplicate {} {}", self.link_name, pair)
            raise DuplicateLinkError(self.link_name, pair) from exc
        logger.debug("Linked {} {}", self.link_name, pair)

    def unlink(self, book_id: int, other_id: int) -> None:
        pair = (book_id, other_id)
        row = self._session.get(self.link_table, pair)
        if row is None:
            raise NotFoundError(self.link_name, pair)
        with self._session.begin_nested():
            self._session.delete(row)
            self._session.flush()
        logger.debug("Unlinked {} {}", self.link_name, pair)

    def pairs(self) -> set[Any]:
        rows = self._session.exec(select(self.link_table)).all()
        return {self.pair_cls.model_validate(row, from_attributes=True) for row in rows}

    def _others_of(self, book_id: int) -> set[Any]:
        self._require(BookTable, book_id)
        statement = (
            select(self.other_table)
            .join(
                self.link_table,
                getattr(self.link_table, self.other_column) == self.other_table.id,
            )
            .where(self.link_table.book_id == book_id)
        )
        return {
            self.other_entity.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        }

    def _books_of(self, other_id: int) -> set[Book]:
        self._require(self.other_table, other_id)
        statement = (
            select(BookTable)
            .join(self.link_table, self.link_table.book_id == BookTable.id)
            .where(getattr(self.link_table, self.other_column) == other_id)
        )
        return {
            Book.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        }

    def _require(self, table: type[SQLModel], entity_id: int) -> None:
        if self._session.get(table, entity_id) is None:
            raise NotFoundError(table.__name__.removesuffix("Table"), entity_id)
