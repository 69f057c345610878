from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Field, SQLModel

from src.catalog.core.errors import ValidationError

EntityT = TypeVar("EntityT", bound=BaseModel)


class Entity(BaseModel):
    """Base entity class with a database-assigned integer identifier."""

    model_config = ConfigDict(extra="forbid", from_attributes=True)

    id: int | None = PydanticField(
        default=None,
        description="Surrogate key, assigned by the database on insert",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with an autoincrement integer primary key."""

    id: int | None = Field(default=None, primary_key=True)


def build_entity(entity_cls: type[EntityT], data: Any) -> EntityT:
    """Validate ``data`` into ``entity_cls``, raising the catalog ValidationError.

    Errors raised by the catalog validation functions are re-raised as they
    are; any other pydantic error is reported against its first field.
    """
    try:
        return entity_cls.model_validate(data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        original = first.get("ctx", {}).get("error")
        if isinstance(original, ValidationError):
            raise original from exc
        field = ".".join(str(part) for part in first["loc"]) or entity_cls.__name__
        raise ValidationError(field, first["msg"]) from exc
