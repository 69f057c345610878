"""Entity package: BookGenre."""

from .entity import BookGenre
from .repository import BookGenreRepository
from .table import BookGenreTable

__all__ = ["BookGenre", "BookGenreRepository", "BookGenreTable"]
