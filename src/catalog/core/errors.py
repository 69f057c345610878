"""Error taxonomy raised by the catalog repositories.

Every error is raised synchronously to the caller and identifies the entity
and, where relevant, the failing field. None of them describe a transient
fault, so callers should not retry.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog store errors."""


class ValidationError(CatalogError, ValueError):
    """A field value is malformed (blank name, bad ISBN/email, bad dates...)."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class NotFoundError(CatalogError, LookupError):
    """A referenced row does not exist."""

    def __init__(self, entity: str, key: Any) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key!r} not found")


class UniqueViolationError(CatalogError):
    """A uniqueness constraint would be breached."""

    def __init__(self, entity: str, field: str, value: Any) -> None:
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with {field}={value!r} already exists")


class DuplicateLinkError(UniqueViolationError):
    """An association pair is already present."""

    def __init__(self, entity: str, pair: tuple[int, int]) -> None:
        super().__init__(entity, "pair", pair)


class IntegrityError(CatalogError):
    """A delete is blocked by dependent loan rows."""

    def __init__(self, entity: str, key: Any, dependents: int) -> None:
        self.entity = entity
        self.key = key
        self.dependents = dependents
        super().__init__(
            f"{entity} {key!r} is referenced by {dependents} loan(s) and cannot be deleted"
        )
