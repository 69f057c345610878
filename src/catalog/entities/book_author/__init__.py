"""Entity package: BookAuthor."""

from .entity import BookAuthor
from .repository import BookAuthorRepository
from .table import BookAuthorTable

__all__ = ["BookAuthor", "BookAuthorRepository", "BookAuthorTable"]
