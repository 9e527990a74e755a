"""
devkit-ddd: building blocks for Domain-Driven-Design models.

Immutable value objects, entities and aggregates with event buffering,
plus deep read-only views and JSON conversion for their props.
"""

import logging

from .domain.common import (
    DDD_ERROR_CODES,
    UNSET,
    Aggregate,
    AggregateRoot,
    ArgumentInvalidError,
    DddError,
    DomainError,
    DomainEvent,
    DomainEventEmitter,
    DomainObject,
    DomainPrimitive,
    Entity,
    EntityId,
    InvalidInputError,
    JsonValue,
    UnsetType,
    ValidationResult,
    ValueObject,
    create_error_codes,
    deep_convert_to_json,
    deep_jsonify,
    handle_validation_result,
    is_domain_primitive,
    is_primitive,
    to_mutable,
    to_readonly,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

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
