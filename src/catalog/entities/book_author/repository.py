"""Data-access layer for book/author links."""

from src.catalog.entities._links import LinkRepository
from src.catalog.entities.author.entity import Author
from src.catalog.entities.author.table import AuthorTable
from src.catalog.entities.book.entity import Book
from src.catalog.entities.book_author.entity import BookAuthor
from src.catalog.entities.book_author.table import BookAuthorTable


class BookAuthorRepository(LinkRepository):
    """Many-to-many credits between books and authors."""

    link_table = BookAuthorTable
    pair_cls = BookAuthor
    other_table = AuthorTable
    other_entity = Author
    other_column = "author_id"

    def authors_of(self, book_id: int) -> set[Author]:
        return self._others_of(book_id)

    def books_of(self, author_id: int) -> set[Book]:
        return self._books_of(author_id)
