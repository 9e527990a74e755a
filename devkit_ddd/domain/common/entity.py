"""
Base classes for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    class UserId(EntityId[str]):
        @property
        def raw_id(self) -> str:
            return self.value

        def validate(self, value: str) -> ValidationResult:
            return bool(value)

    class User(Entity[UserProps, UserId]):
        @property
        def id(self) -> UserId:
            return self.props["id"]

        def validate(self, props: UserProps) -> ValidationResult:
            return None

    user = User({"id": UserId("u-1"), "name": "Ada"})
    renamed = user.evolve(name="Ada Lovelace")
"""

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, Self, TypeVar

from .domain_object import DomainObject
from .exceptions import ArgumentInvalidError
from .jsonify import deep_convert_to_json
from .readonly import apply_changes, to_readonly
from .types import UNSET, ValidationResult
from .validation import handle_validation_result
from .value_object import ValueObject

T = TypeVar("T")


class EntityId(ValueObject[T], Generic[T]):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that expose a string form of the identity
    through ``raw_id``. The identity may be a single primitive or composite.

    Example:
        class OrderLineId(EntityId[dict[str, Any]]):
            @property
            def raw_id(self) -> str:
                return f"{self.value['order']}-{self.value['line']}"
    """

    @property
    @abstractmethod
    def raw_id(self) -> str:
        """String form of the identity."""

    def __str__(self) -> str:
        return self.raw_id


PropsType = TypeVar("PropsType", bound=Mapping[str, Any])
IdType = TypeVar("IdType", bound=EntityId[Any])


class Entity(DomainObject, Generic[PropsType, IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Immutable snapshots; state changes produce a new instance via evolve
    - Validated on every construction

    Subclasses must provide an ``id`` property returning an EntityId and a
    ``validate`` hook. ``props`` is a deep read-only view in which nested
    value objects and entities are kept by reference.
    """

    def __init__(self, props: PropsType) -> None:
        self._validate_props(props)
        self._props: Mapping[str, Any] = to_readonly(props)

    @property
    @abstractmethod
    def id(self) -> IdType:
        """Identity of this entity."""

    @abstractmethod
    def validate(self, props: PropsType) -> ValidationResult:
        """Check props; see handle_validation_result for the accepted results."""

    @classmethod
    def _from_props(cls, props: Any) -> Self:
        """Build a sibling instance. Override when the constructor takes other arguments."""
        return cls(props)

    @property
    def props(self) -> Mapping[str, Any]:
        """Deep read-only snapshot of the props."""
        return self._props

    def equals(self, other: "Entity[Any, Any]") -> bool:
        return self.id.equals(other.id)

    def evolve(self, partial_or_recipe: Any = UNSET, /, **changes: Any) -> Self:
        """
        Derive a new entity of the same concrete type.

        Accepts a partial mapping or keyword changes, which are merged over
        the current props; keys set to UNSET are removed. A recipe receives a
        mutable draft of the props and either mutates it and returns None or
        returns the complete new props. A mapping returned by a recipe is not
        merged: keys it omits are dropped. The original instance is left
        untouched and the new props are validated again.
        """
        return self._derive(apply_changes(self._props, partial_or_recipe, changes))

    def to_json(self) -> Any:
        return deep_convert_to_json(self._props)

    def _derive(self, props: Any) -> Self:
        return type(self)._from_props(props)

    def _validate_props(self, props: PropsType) -> None:
        if props is None or props is UNSET:
            raise ArgumentInvalidError("The props must not be undefined")

        handle_validation_result(self.validate(props))

        if not isinstance(props, Mapping):
            raise ArgumentInvalidError("The props must be a mapping")
        if len(props) == 0:
            raise ArgumentInvalidError("The props must not be empty object")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
