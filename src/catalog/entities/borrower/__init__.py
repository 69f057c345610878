"""Entity package: Borrower."""

from .entity import Borrower
from .repository import BorrowerRepository
from .table import BorrowerTable

__all__ = ["Borrower", "BorrowerRepository", "BorrowerTable"]
