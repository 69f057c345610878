"""Field validation functions mirroring the catalog table CHECK constraints.

Each function returns the (possibly normalised) value or raises
:class:`~src.catalog.core.errors.ValidationError` naming the field. Entity
models call these from their pydantic validators so that every row is
checked before it reaches the database.
"""

import re
from datetime import date

from src.catalog.core.errors import ValidationError

ISBN_LENGTH = 13
MIN_PUBLICATION_YEAR = 1000

_ISBN_RE = re.compile(r"\d{13}", re.ASCII)
# local@domain.tld: one or more chars before "@", then at least two
# non-empty dot-separated domain segments.
_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s.]+(\.[^@\s.]+)+")


def require_non_blank(field: str, value: str) -> str:
    if not value.strip():
        raise ValidationError(field, "must not be empty")
    return value


def validate_isbn(value: str) -> str:
    """ISBN-13: exactly 13 digits, no separators."""
    if len(value) != ISBN_LENGTH:
        raise ValidationError("isbn", f"must be {ISBN_LENGTH} characters, got {len(value)}")
    if not _ISBN_RE.fullmatch(value):
        raise ValidationError("isbn", "must contain digits only")
    return value


def validate_publication_year(value: int | None) -> int | None:
    if value is not None and value < MIN_PUBLICATION_YEAR:
        raise ValidationError(
            "publication_year", f"must be >= {MIN_PUBLICATION_YEAR}, got {value}"
        )
    return value


def validate_email(value: str) -> str:
    if not _EMAIL_RE.fullmatch(value):
        raise ValidationError("email", f"{value!r} is not a valid email address")
    return value


def validate_loan_dates(loan_date: date, due_date: date) -> None:
    if loan_date > due_date:
        raise ValidationError(
            "due_date", f"due date {due_date} is before loan date {loan_date}"
        )


def validate_return_date(loan_date: date, return_date: date | None) -> None:
    if return_date is not None and return_date < loan_date:
        raise ValidationError(
            "return_date", f"return date {return_date} is before loan date {loan_date}"
        )
