"""Data-access layer for books."""

from sqlmodel import col, select

from src.catalog.entities._repository import EntityRepository
from src.catalog.entities.book.entity import Book
from src.catalog.entities.book.table import BookTable


class BookRepository(EntityRepository[Book, BookTable]):
    """Data-access layer for books.

    Deleting a book removes its author and genre links, but is refused while
    any loan still references it.
    """

    entity_cls = Book
    table_cls = BookTable
    unique_field = "isbn"
    loan_column = "book_id"

    def find_by_isbn(self, isbn: str) -> Book | None:
        row = self._session.exec(select(BookTable).where(BookTable.isbn == isbn)).first()
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def search_by_title(self, fragment: str) -> list[Book]:
        """Case-insensitive substring match on the title."""
        statement = (
            select(BookTable)
            .where(col(BookTable.title).icontains(fragment, autoescape=True))
            .order_by(BookTable.title, BookTable.id)
        )
        return [
            Book.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        ]

    def _delete_dependents(self, entity_id: int) -> int:
        from src.catalog.entities.book_author.table import BookAuthorTable
        from src.catalog.entities.book_genre.table import BookGenreTable

        return self._delete_links(BookAuthorTable, "book_id", entity_id) + self._delete_links(
            BookGenreTable, "book_id", entity_id
        )
