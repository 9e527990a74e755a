"""
Base class for Domain Events.

Domain Events represent something significant that happened in the domain.
They are immutable records of past occurrences that other parts of the
system can react to.

Example:
    class OrderPlaced(DomainEvent[dict[str, Any]]):
        def validate_payload(self, payload: dict[str, Any] | None) -> ValidationResult:
            if not payload or "total" not in payload:
                return "OrderPlaced requires a total"
            return None

    OrderPlaced("order-1", payload={"total": 42})
    OrderPlaced({"aggregate_id": "order-1", "payload": {"total": 42}})
"""

import time
from abc import abstractmethod
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar
from uuid import uuid4

from .domain_object import DomainObject
from .exceptions import ArgumentInvalidError
from .jsonify import deep_convert_to_json
from .readonly import to_readonly
from .types import UNSET, ValidationResult
from .validation import handle_validation_result

PayloadType = TypeVar("PayloadType")

EVENT_FIELDS = frozenset(
    {
        "event_id",
        "aggregate_id",
        "event_type",
        "timestamp",
        "correlation_id",
        "causation_id",
        "payload",
    }
)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class DomainEvent(DomainObject, Generic[PayloadType]):
    """
    Base class for Domain Events.

    Domain Events are:
    - Immutable (attributes are read-only once constructed)
    - Named in past tense (OrderPlaced, not PlaceOrder)
    - Self-contained (carry all data needed to understand what happened)
    - Timestamped, in milliseconds since the epoch

    Construct with an aggregate id, a props mapping, keyword props, or a
    mapping combined with keyword overrides. Missing ``event_id``,
    ``event_type`` and ``timestamp`` are generated.
    """

    def __init__(
        self,
        aggregate_id_or_props: str | Mapping[str, Any] | Any = UNSET,
        /,
        **props: Any,
    ) -> None:
        if isinstance(aggregate_id_or_props, Mapping):
            fields = {**aggregate_id_or_props, **props}
        elif aggregate_id_or_props is UNSET:
            fields = dict(props)
        else:
            fields = {"aggregate_id": aggregate_id_or_props, **props}

        unknown = sorted(set(fields) - EVENT_FIELDS)
        if unknown:
            raise ArgumentInvalidError(
                f"Unknown DomainEvent field(s): {', '.join(unknown)}",
                {"fields": unknown},
            )

        self._event_id: str = _default(fields.get("event_id"), lambda: str(uuid4()))
        self._aggregate_id: Any = fields.get("aggregate_id", UNSET)
        self._event_type: str = _default(fields.get("event_type"), lambda: type(self).__name__)
        self._timestamp: Any = _default(fields.get("timestamp"), _now_ms)
        self._correlation_id: str | None = _optional(fields.get("correlation_id"))
        self._causation_id: str | None = _optional(fields.get("causation_id"))
        self._payload: Any = to_readonly(_optional(fields.get("payload")))

        self._validate()

    @abstractmethod
    def validate_payload(self, payload: PayloadType | None) -> ValidationResult:
        """Check the payload; see handle_validation_result for the accepted results."""

    @property
    def event_id(self) -> str:
        return self._event_id

    @property
    def aggregate_id(self) -> str:
        return self._aggregate_id

    @property
    def event_type(self) -> str:
        """Event type name, the concrete class name unless given explicitly."""
        return self._event_type

    @property
    def timestamp(self) -> int | float:
        return self._timestamp

    @property
    def occurred_at(self) -> datetime:
        """Timestamp as an aware UTC datetime."""
        return datetime.fromtimestamp(self._timestamp / 1000, tz=UTC)

    @property
    def correlation_id(self) -> str | None:
        return self._correlation_id

    @property
    def causation_id(self) -> str | None:
        return self._causation_id

    @property
    def payload(self) -> Any:
        """Deep read-only view of the payload, or None."""
        return self._payload

    def to_json(self) -> dict[str, Any]:
        """Convert event to a JSON-safe dictionary."""
        result: dict[str, Any] = {
            "event_id": self._event_id,
            "event_type": self._event_type,
            "aggregate_id": self._aggregate_id,
            "timestamp": self._timestamp,
        }
        if self._correlation_id is not None:
            result["correlation_id"] = self._correlation_id
        if self._causation_id is not None:
            result["causation_id"] = self._causation_id
        if self._payload is not None:
            result["payload"] = deep_convert_to_json(self._payload)
        return result

    def _validate(self) -> None:
        if not isinstance(self._aggregate_id, str) or len(self._aggregate_id) == 0:
            raise ArgumentInvalidError("DomainEvent must have an aggregate_id")
        if (
            isinstance(self._timestamp, bool)
            or not isinstance(self._timestamp, (int, float))
            or self._timestamp < 0
        ):
            raise ArgumentInvalidError("DomainEvent must have a valid timestamp")
        for name in ("correlation_id", "causation_id"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ArgumentInvalidError(f"DomainEvent {name} must be a string")

        handle_validation_result(self.validate_payload(self._payload))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self._event_id == other._event_id

    def __hash__(self) -> int:
        return hash(self._event_id)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(event_id={self._event_id!r}, "
            f"aggregate_id={self._aggregate_id!r}, timestamp={self._timestamp!r})"
        )


def _default(value: Any, factory: Any) -> Any:
    if value is None or value is UNSET:
        return factory()
    return value


def _optional(value: Any) -> Any:
    return None if value is UNSET else value
