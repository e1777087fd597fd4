# hostel_core/services/common/mapping.py
"""
Model-Schema mapping utilities.

Conversions run while the owning session is still open, so lazy
relationships can load; the resulting schemas are detached copies.
"""
from __future__ import annotations

from typing import Iterable, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from hostel_core.core.exceptions import TransactionError

TModel = TypeVar("TModel")
TSchema = TypeVar("TSchema", bound=BaseModel)


class MappingError(TransactionError):
    """Raised when a stored row cannot be represented by its schema."""


def to_schema(obj: TModel, schema_cls: Type[TSchema]) -> TSchema:
    """
    Convert an ORM model to a Pydantic schema.

    Raises:
        MappingError: If the row does not satisfy the schema
    """
    try:
        return schema_cls.model_validate(obj)
    except ValidationError as exc:
        raise MappingError(
            f"Failed to convert {type(obj).__name__} to {schema_cls.__name__}",
            exc,
        ) from exc


def to_optional_schema(obj: Optional[TModel], schema_cls: Type[TSchema]) -> Optional[TSchema]:
    return None if obj is None else to_schema(obj, schema_cls)


def to_schema_list(objs: Iterable[TModel], schema_cls: Type[TSchema]) -> list[TSchema]:
    return [to_schema(obj, schema_cls) for obj in objs]
