# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion used by the typed lookup surface of `BoundArguments`.

Binding itself keeps every value as text. Commands that want numbers, enums,
booleans or timestamps ask for them at lookup time:

    count = arguments.get("count", type=int)
    when = arguments.get("since", type=datetime)

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string to an Enum member by name or value.
- coerce_value: General-purpose coercion, including Literal and Union types.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

_TRUE = {"true", "t", "1", "yes", "y", "on"}
_FALSE = {"false", "f", "0", "no", "n", "off"}


def coerce_bool(value: str | bool) -> bool:
    """Convert common truthy and falsy spellings to a bool."""
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValueError(f"'{value}' is not a boolean value")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Resolve `value` to a member of `enum_type` by name, then by value.

    Raises:
        ValueError: If no member matches.
    """
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass
    base_type = type(next(iter(enum_type)).value)
    try:
        return enum_type(base_type(value))
    except (ValueError, TypeError):
        values = [str(member.value) for member in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Convert a bound text value to `target_type`.

    Raises:
        ValueError: If the conversion fails.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(f"'{value}' should be one of {{{', '.join(map(str, args))}}}")
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"'{value}' could not be converted to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"'{value}' could not be parsed as a datetime") from error

    return target_type(value)
