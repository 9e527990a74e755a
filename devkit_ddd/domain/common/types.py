"""Shared type aliases and the UNSET sentinel."""

from datetime import date
from typing import TYPE_CHECKING, Any, Final, Protocol, TypeAlias, final

if TYPE_CHECKING:
    from .domain_event import DomainEvent


@final
class UnsetType:
    """
    Marker for a value that was never provided.

    Distinct from None, which is a valid domain primitive. In partial
    updates, a key mapped to UNSET is removed from the props.
    """

    _instance: "UnsetType | None" = None

    def __new__(cls) -> "UnsetType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Final = UnsetType()

DomainPrimitive: TypeAlias = str | int | float | bool | None | date

JsonPrimitive: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonPrimitive | list["JsonValue"] | dict[str, "JsonValue"]

# None or True means valid; False, a message or an exception means invalid.
ValidationResult: TypeAlias = None | bool | str | BaseException

Props: TypeAlias = dict[str, Any]


class DomainEventEmitter(Protocol):
    """Anything that accepts one domain event at a time."""

    def emit(self, event: "DomainEvent[Any]") -> None: ...
