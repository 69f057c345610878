"""Data-access layer for book/genre links."""

from src.catalog.entities._links import LinkRepository
from src.catalog.entities.book.entity import Book
from src.catalog.entities.book_genre.entity import BookGenre
from src.catalog.entities.book_genre.table import BookGenreTable
from src.catalog.entities.genre.entity import Genre
from src.catalog.entities.genre.table import GenreTable


class BookGenreRepository(LinkRepository):
    """Many-to-many classifications between books and genres."""

    link_table = BookGenreTable
    pair_cls = BookGenre
    other_table = GenreTable
    other_entity = Genre
    other_column = "genre_id"

    def genres_of(self, book_id: int) -> set[Genre]:
        return self._others_of(book_id)

    def books_of(self, genre_id: int) -> set[Book]:
        return self._books_of(genre_id)
