"""
Base class shared by value objects, entities and aggregates.

A domain object owns its immutability. The read-only converter never
freezes or copies one; it keeps the reference as-is.
"""

from abc import ABCMeta, abstractmethod
from typing import Any


class DomainObjectMeta(ABCMeta):
    """Freezes every instance once its whole constructor chain has run."""

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        instance = super().__call__(*args, **kwargs)
        object.__setattr__(instance, "_frozen", True)
        return instance


class DomainObject(metaclass=DomainObjectMeta):
    """Common ancestor of every immutable domain model type."""

    __slots__ = ()

    @abstractmethod
    def to_json(self) -> Any:
        """Return a JSON-safe representation of this object."""

    def __setattr__(self, name: str, value: object) -> None:
        if self.__dict__.get("_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable; use evolve() to derive a new instance")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")
