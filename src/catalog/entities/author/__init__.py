"""Entity package: Author."""

from .entity import Author
from .repository import AuthorRepository
from .table import AuthorTable

__all__ = ["Author", "AuthorRepository", "AuthorTable"]
