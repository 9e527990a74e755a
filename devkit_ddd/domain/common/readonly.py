"""
Deep read-only views of props.

to_readonly freezes every structural level of a props tree: mappings
become MappingProxyType views over private dicts, sequences become tuples.
Domain objects, dates and scalars are returned unchanged, so nested value
objects and entities keep their identity.

to_mutable walks the other way and produces a draft that a recipe may
mutate freely before it is validated into a new instance. apply_changes
computes the next raw value for evolve from a partial mapping or a recipe.
"""

from collections.abc import Mapping
from datetime import date
from types import MappingProxyType
from typing import Any

from .domain_object import DomainObject
from .primitives import is_primitive
from .types import UNSET


def to_readonly(value: Any) -> Any:
    """Return a deep read-only view of value."""
    if is_primitive(value) or isinstance(value, (date, DomainObject)):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(to_readonly(item) for item in value)
    if isinstance(value, Mapping):
        return MappingProxyType({key: to_readonly(item) for key, item in value.items()})
    return value


def to_mutable(value: Any) -> Any:
    """Return a mutable deep copy of a read-only view; domain objects are shared."""
    if is_primitive(value) or isinstance(value, (date, DomainObject)):
        return value
    if isinstance(value, (list, tuple)):
        return [to_mutable(item) for item in value]
    if isinstance(value, Mapping):
        return {key: to_mutable(item) for key, item in value.items()}
    return value


def apply_changes(
    current: Mapping[str, Any],
    change: Any = UNSET,
    changes: Mapping[str, Any] | None = None,
) -> Any:
    """
    Compute the next structured value from current.

    Args:
        current: Read-only view being evolved
        change: A partial mapping merged key by key, or a recipe that
            receives a mutable draft. A recipe may mutate the draft in place
            or return a replacement value. A returned value replaces the
            whole of current, it is not merged, so a recipe computing only
            some keys must assign them on the draft instead.
        changes: Keyword changes merged after ``change``

    Returns:
        The new raw value; keys mapped to UNSET are removed
    """
    changes = changes or {}

    if callable(change):
        if changes:
            raise TypeError("evolve() takes either a recipe or keyword changes, not both")
        draft = to_mutable(current)
        replacement = change(draft)
        return draft if replacement is None else replacement

    updates: dict[str, Any] = {}
    if change is not UNSET:
        if not isinstance(change, Mapping):
            raise TypeError(f"evolve() expects a mapping or a callable, got {type(change).__name__}")
        updates.update(change)
    updates.update(changes)

    merged = dict(current)
    for key, value in updates.items():
        if value is UNSET:
            merged.pop(key, None)
        else:
            merged[key] = value
    return merged
