"""Entity package: Loan."""

from .entity import Loan
from .repository import LoanLedger
from .table import LoanTable

__all__ = ["Loan", "LoanLedger", "LoanTable"]
