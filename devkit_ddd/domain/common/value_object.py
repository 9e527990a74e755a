"""
Base class for Value Objects.

Value Objects are immutable objects that are defined by their value
rather than by identity. Two value objects are equal if their values
are deeply equal.

A value object wraps either a single domain primitive or a structured
mapping. Example:

    class Email(ValueObject[str]):
        def validate(self, value: str) -> ValidationResult:
            if "@" not in value:
                return "Invalid email format"
            return None

    class Money(ValueObject[dict[str, Any]]):
        def validate(self, value: dict[str, Any]) -> ValidationResult:
            return value.get("amount", 0) >= 0

    price = Money({"amount": 10, "currency": "EUR"})
    discounted = price.evolve(amount=8)
"""

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, Self, TypeVar

from .domain_object import DomainObject
from .exceptions import ArgumentInvalidError
from .jsonify import deep_convert_to_json
from .primitives import is_domain_primitive
from .readonly import apply_changes, to_readonly
from .types import UNSET, ValidationResult
from .validation import handle_validation_result

T = TypeVar("T")


class ValueObject(DomainObject, Generic[T]):
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (the value is exposed as a deep read-only view)
    - Compared by value (deep structural equality)
    - Self-validating (``validate`` runs on every construction)

    Subclasses implement ``validate`` and may add domain behaviour on top
    of ``value``.
    """

    def __init__(self, value: T) -> None:
        self._validate_value(value)
        self._is_domain_primitive = is_domain_primitive(value)
        self._value = to_readonly(value)

    @abstractmethod
    def validate(self, value: T) -> ValidationResult:
        """Check value; see handle_validation_result for the accepted results."""

    @classmethod
    def _from_value(cls, value: Any) -> Self:
        """Build a sibling instance. Override when the constructor takes other arguments."""
        return cls(value)

    @property
    def value(self) -> Any:
        """Deep read-only view of the wrapped value."""
        return self._value

    @property
    def is_domain_primitive(self) -> bool:
        """Whether the wrapped value is a single domain primitive."""
        return self._is_domain_primitive

    def equals(self, other: "ValueObject[Any]") -> bool:
        return self._value == other._value

    def evolve(self, value_or_recipe: Any = UNSET, /, **changes: Any) -> Self:
        """
        Derive a new value object of the same concrete type.

        For a primitive value object pass the replacement value, or a
        callable mapping the current value to the replacement. For a
        structured value object pass a partial mapping, keyword changes
        or a recipe mutating a draft; keys set to UNSET are removed. A
        recipe that returns a mapping replaces the whole value instead of
        being merged into it.

        The original instance is never modified, and the new value goes
        through the full validation contract.
        """
        if self._is_domain_primitive:
            if changes:
                raise TypeError("evolve() of a primitive value object takes a single replacement value")
            if callable(value_or_recipe):
                value_or_recipe = value_or_recipe(self._value)
            return type(self)._from_value(value_or_recipe)

        return type(self)._from_value(apply_changes(self._value, value_or_recipe, changes))

    def to_json(self) -> Any:
        return deep_convert_to_json(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.__class__, _hashable(self._value)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"

    def _validate_value(self, value: T) -> None:
        if value is UNSET:
            raise ArgumentInvalidError("The value must not be undefined")

        handle_validation_result(self.validate(value))

        if is_domain_primitive(value):
            return
        if not isinstance(value, Mapping):
            raise ArgumentInvalidError("The value must be a domain primitive or a mapping")
        if len(value) == 0:
            raise ArgumentInvalidError("The value must not be empty object")


def _hashable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return frozenset((key, _hashable(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(item) for item in value)
    return value
