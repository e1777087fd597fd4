"""
Model-level validators.

Coerce enumerated fields to their closed enum at the store boundary.
"""

from enum import Enum
from typing import Any, Type, TypeVar

from hostel_core.core.exceptions import ValidationError

TEnum = TypeVar("TEnum", bound=Enum)


def coerce_enum(enum_cls: Type[TEnum], value: Any, field: str) -> TEnum:
    """
    Convert a raw value to a member of ``enum_cls``.

    Raises:
        ValidationError: If the value is not one of the enum's values
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = [member.value for member in enum_cls]
        raise ValidationError(
            f"Invalid value {value!r} for {field}",
            field_errors={field: [f"must be one of {allowed}"]},
        ) from None
