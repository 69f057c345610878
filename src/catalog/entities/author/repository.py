"""Data-access layer for authors."""

from sqlmodel import select

from src.catalog.entities._repository import EntityRepository
from src.catalog.entities.author.entity import Author
from src.catalog.entities.author.table import AuthorTable


class AuthorRepository(EntityRepository[Author, AuthorTable]):
    """Data-access layer for authors."""

    entity_cls = Author
    table_cls = AuthorTable

    def find_by_last_name(self, last_name: str) -> list[Author]:
        statement = (
            select(AuthorTable)
            .where(AuthorTable.last_name == last_name)
            .order_by(AuthorTable.first_name, AuthorTable.id)
        )
        return [
            Author.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        ]

    def _delete_dependents(self, entity_id: int) -> int:
        from src.catalog.entities.book_author.table import BookAuthorTable

        return self._delete_links(BookAuthorTable, "author_id", entity_id)
