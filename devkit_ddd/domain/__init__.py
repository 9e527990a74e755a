"""
Domain layer.

The domain layer contains the building blocks for modeling business logic.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Value Objects: Immutable objects defined by their value
- Entities: Objects with identity
- Aggregate Roots: Consistency boundaries that buffer domain events
- Domain Events: Immutable records of what happened
"""
