"""The catalog & lending store: every repository bound to one session."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlmodel import Session

from src.catalog.core.services.database.db_session import DbSessionService
from src.catalog.entities import (
    AuthorRepository,
    BookAuthorRepository,
    BookGenreRepository,
    BookRepository,
    BorrowerRepository,
    GenreRepository,
    LoanLedger,
)


class CatalogStore:
    """Facade over the catalog repositories sharing one unit of work.

    Every repository writes through the same session, so whatever a caller
    does between two commits is persisted or discarded as a whole.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.authors = AuthorRepository(session)
        self.genres = GenreRepository(session)
        self.books = BookRepository(session)
        self.borrowers = BorrowerRepository(session)
        self.book_authors = BookAuthorRepository(session)
        self.book_genres = BookGenreRepository(session)
        self.loans = LoanLedger(session)


@contextmanager
def catalog_scope(db: DbSessionService) -> Iterator[CatalogStore]:
    """Yield a store whose work is committed on exit, or rolled back on error."""
    with db.session_scope() as session:
        yield CatalogStore(session)
