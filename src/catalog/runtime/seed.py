"""Sample catalog: a handful of classics, three members and their loans.

The rows are loaded through the repositories, so they pass the same
validation as any other write. Useful as fixture data and for demo databases.
"""

from dataclasses import dataclass, field

from loguru import logger

from src.catalog.core.services.catalog_store import CatalogStore

AUTHORS = [
    {"first_name": "Jane", "last_name": "Austen", "nationality": "British"},
    {"first_name": "George", "last_name": "Orwell", "nationality": "British"},
    {"first_name": "J.R.R.", "last_name": "Tolkien", "nationality": "British"},
    {"first_name": "Agatha", "last_name": "Christie", "nationality": "British"},
    {"first_name": "Stephen", "last_name": "King", "nationality": "American"},
]

GENRES = ["Fiction", "Fantasy", "Classic", "Mystery", "Horror", "Science Fiction"]

BOOKS = [
    {"title": "Pride and Prejudice", "isbn": "9780141439518", "publication_year": 1813},
    {"title": "1984", "isbn": "9780451524935", "publication_year": 1949},
    {"title": "The Hobbit", "isbn": "9780345339683", "publication_year": 1937},
    {"title": "Murder on the Orient Express", "isbn": "9780062073495", "publication_year": 1934},
    {"title": "It", "isbn": "9780451457813", "publication_year": 1986},
    {"title": "The Lord of the Rings", "isbn": "9780618053267", "publication_year": 1954},
]

# (book title, author last name)
BOOK_AUTHORS = [
    ("Pride and Prejudice", "Austen"),
    ("1984", "Orwell"),
    ("The Hobbit", "Tolkien"),
    ("Murder on the Orient Express", "Christie"),
    ("It", "King"),
    ("The Lord of the Rings", "Tolkien"),
]

# (book title, genre name)
BOOK_GENRES = [
    ("Pride and Prejudice", "Classic"),
    ("Pride and Prejudice", "Fiction"),
    ("1984", "Science Fiction"),
    ("1984", "Classic"),
    ("The Hobbit", "Fantasy"),
    ("The Hobbit", "Fiction"),
    ("Murder on the Orient Express", "Mystery"),
    ("It", "Horror"),
    ("The Lord of the Rings", "Fantasy"),
]

BORROWERS = [
    {
        "first_name": "Alice",
        "last_name": "Smith",
        "email": "alice.smith@example.com",
        "phone": "123-456-7890",
        "address": "123 Main St, Anytown",
    },
    {
        "first_name": "Bob",
        "last_name": "Johnson",
        "email": "bob.johnson@example.com",
        "phone": "987-654-3210",
        "address": "456 Oak Ave, Somewhereville",
    },
    {
        "first_name": "Charlie",
        "last_name": "Brown",
        "email": "charlie.brown@example.com",
        "phone": "555-123-4567",
        "address": "789 Pine Ln, Nowhere City",
    },
]

# (book title, borrower email, loan date, due date, return date)
LOANS = [
    ("Pride and Prejudice", "alice.smith@example.com", "2025-06-01", "2025-06-15", "2025-06-14"),
    ("1984", "bob.johnson@example.com", "2025-06-10", "2025-06-25", None),
    ("The Hobbit", "charlie.brown@example.com", "2025-06-15", "2025-06-30", None),
    ("Pride and Prejudice", "bob.johnson@example.com", "2025-06-20", "2025-07-05", None),
]


@dataclass
class SeedIds:
    """Ids of the seeded rows keyed by their natural keys."""

    authors: dict[str, int] = field(default_factory=dict)  # by last name
    genres: dict[str, int] = field(default_factory=dict)  # by name
    books: dict[str, int] = field(default_factory=dict)  # by title
    borrowers: dict[str, int] = field(default_factory=dict)  # by email
    loans: list[int] = field(default_factory=list)  # in LOANS order


def seed_catalog(store: CatalogStore) -> SeedIds:
    """Insert the sample catalog into ``store`` and return the new ids."""
    ids = SeedIds()
    for author in AUTHORS:
        ids.authors[author["last_name"]] = store.authors.create(**author)
    for name in GENRES:
        ids.genres[name] = store.genres.create(name=name)
    for book in BOOKS:
        ids.books[book["title"]] = store.books.create(**book)
    for title, last_name in BOOK_AUTHORS:
        store.book_authors.link(ids.books[title], ids.authors[last_name])
    for title, genre in BOOK_GENRES:
        store.book_genres.link(ids.books[title], ids.genres[genre])
    for borrower in BORROWERS:
        ids.borrowers[borrower["email"]] = store.borrowers.create(**borrower)

    for title, email, loan_date, due_date, return_date in LOANS:
        loan_id = store.loans.borrow(ids.books[title], ids.borrowers[email], loan_date, due_date)
        if return_date is not None:
            store.loans.return_book(loan_id, return_date)
        ids.loans.append(loan_id)

    logger.info(
        "Seeded {} authors, {} genres, {} books, {} borrowers, {} loans",
        len(ids.authors),
        len(ids.genres),
        len(ids.books),
        len(ids.borrowers),
        len(ids.loans),
    )
    return ids
