"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their value
- Entity: Objects with identity, evolved into new immutable snapshots
- AggregateRoot: Consistency boundaries buffering domain events
- DomainEvent: Notifications of significant domain occurrences

and the helpers they share: read-only views, JSON conversion and the
validation pipeline.
"""

from .aggregate_root import Aggregate, AggregateRoot
from .domain_event import DomainEvent
from .domain_object import DomainObject
from .entity import Entity, EntityId
from .error_codes import DDD_ERROR_CODES, create_error_codes
from .exceptions import (
    ArgumentInvalidError,
    DddError,
    DomainError,
    InvalidInputError,
)
from .jsonify import deep_convert_to_json, deep_jsonify
from .primitives import is_domain_primitive, is_primitive
from .readonly import to_mutable, to_readonly
from .types import (
    UNSET,
    DomainEventEmitter,
    DomainPrimitive,
    JsonValue,
    UnsetType,
    ValidationResult,
)
from .validation import handle_validation_result
from .value_object import ValueObject

__all__ = [
    "DDD_ERROR_CODES",
    "UNSET",
    "Aggregate",
    "AggregateRoot",
    "ArgumentInvalidError",
    "DddError",
    "DomainError",
    "DomainEvent",
    "DomainEventEmitter",
    "DomainObject",
    "DomainPrimitive",
    "Entity",
    "EntityId",
    "InvalidInputError",
    "JsonValue",
    "UnsetType",
    "ValidationResult",
    "ValueObject",
    "create_error_codes",
    "deep_convert_to_json",
    "deep_jsonify",
    "handle_validation_result",
    "is_domain_primitive",
    "is_primitive",
    "to_mutable",
    "to_readonly",
]
