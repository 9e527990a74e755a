"""
Deep conversion of object graphs into JSON-safe data.

A single recursive converter serves two callers:

- the lenient mode (default) used for arbitrary graphs: UNSET passes
  through untouched and non-JSON scalars (bytes, complex) become ``{}``;
- the strict mode used when exporting domain objects: those same values
  raise InvalidInputError.

Objects exposing ``to_json()`` are trusted; their result is used verbatim.
"""

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import date
from enum import Enum
from typing import Any
from uuid import UUID

from .exceptions import InvalidInputError
from .types import UNSET

_NON_JSON_SCALARS = (bytes, bytearray, complex)


def deep_jsonify(value: Any, *, strict: bool = False) -> Any:
    """
    Convert value into JSON-safe data.

    Args:
        value: Arbitrary value graph
        strict: Raise on UNSET and non-JSON scalars instead of passing them
            through or replacing them with an empty object

    Returns:
        JSON-safe value (dict, list, str, int, float, bool or None)

    Raises:
        InvalidInputError: If a value has no JSON representation
    """
    if value is UNSET:
        if strict:
            raise InvalidInputError("Cannot convert UNSET to JSON", value)
        return value
    if isinstance(value, _NON_JSON_SCALARS):
        if strict:
            raise InvalidInputError(f"Cannot convert a {type(value).__name__} value to JSON", value)
        return {}
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return {}
    if isinstance(value, (list, tuple)):
        return [deep_jsonify(item, strict=strict) for item in value]

    to_json = getattr(value, "to_json", None)
    if callable(to_json) and not isinstance(value, type):
        return to_json()

    if isinstance(value, Mapping):
        return _jsonify_items(value.items(), strict=strict)
    if is_dataclass(value) and not isinstance(value, type):
        return _jsonify_items(
            ((field.name, getattr(value, field.name)) for field in fields(value)),
            strict=strict,
        )
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return deep_jsonify(value.value, strict=strict)

    raise InvalidInputError(f"Cannot convert {value!r} to JSON", value)


def deep_convert_to_json(value: Any) -> Any:
    """Strict variant of deep_jsonify used by domain object exports."""
    return deep_jsonify(value, strict=True)


def _jsonify_items(items: Any, *, strict: bool) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, item in items:
        if not isinstance(key, str):
            raise InvalidInputError(f"Cannot convert mapping key {key!r} to JSON", key)
        result[key] = deep_jsonify(item, strict=strict)
    return result
