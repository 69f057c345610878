"""Data-access layer for genres."""

from sqlmodel import select

from src.catalog.entities._repository import EntityRepository
from src.catalog.entities.genre.entity import Genre
from src.catalog.entities.genre.table import GenreTable


class GenreRepository(EntityRepository[Genre, GenreTable]):
    entity_cls = Genre
    table_cls = GenreTable
    unique_field = "name"

    def find_by_name(self, name: str) -> Genre | None:
        row = self._session.exec(select(GenreTable).where(GenreTable.name == name)).first()
        if row is None:
            return None
        return Genre.model_validate(row, from_attributes=True)

    def _delete_dependents(self, entity_id: int) -> int:
        from src.catalog.entities.book_genre.table import BookGenreTable

        return self._delete_links(BookGenreTable, "genre_id", entity_id)
