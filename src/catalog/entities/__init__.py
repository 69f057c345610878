"""Entities module with an entity-centric package structure.

Each entity has its own package containing:
- entity.py: domain model with validation
- table.py: database persistence model
- repository.py: data access layer

The import order below registers every table with the SQLModel metadata and
keeps the cross-package imports acyclic: link and loan repositories depend on
the entity packages, never the other way round.
"""

from .author import Author, AuthorRepository, AuthorTable
from .book import Book, BookRepository, BookTable
from .borrower import Borrower, BorrowerRepository, BorrowerTable
from .genre import Genre, GenreRepository, GenreTable
from .book_author import BookAuthor, BookAuthorRepository, BookAuthorTable
from .book_genre import BookGenre, BookGenreRepository, BookGenreTable
from .loan import Loan, LoanLedger, LoanTable

__all__ = [
    "Author",
    "AuthorRepository",
    "AuthorTable",
    "Book",
    "BookRepository",
    "BookTable",
    "Borrower",
    "BorrowerRepository",
    "BorrowerTable",
    "Genre",
    "GenreRepository",
    "GenreTable",
    "BookAuthor",
    "BookAuthorRepository",
    "BookAuthorTable",
    "BookGenre",
    "BookGenreRepository",
    "BookGenreTable",
    "Loan",
    "LoanLedger",
    "LoanTable",
]
