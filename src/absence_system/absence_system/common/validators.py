from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} es obligatorio")
    return str(value).strip()


def require_non_negative_int(value, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} debe ser un número entero")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValidationError(f"{field_name} debe ser un número entero") from e
    if isinstance(value, float) and value != number:
        raise ValidationError(f"{field_name} debe ser un número entero")
    if number < 0:
        raise ValidationError(f"{field_name} no puede ser negativo")
    return number


def require_enum(value, enum_type: type[E], field_name: str) -> E:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError as e:
        raise ValidationError(f"{field_name} no válido: {value!r}") from e
