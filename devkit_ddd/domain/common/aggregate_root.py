"""
Base class for Aggregate Roots.

Aggregate Roots are the entry point to an aggregate - a cluster of domain
objects that are treated as a single unit. All external references should
go through the aggregate root, and all invariants are enforced here.

Aggregates are immutable: recording an event returns a new aggregate whose
buffer holds the event. The buffer is delivered by publish_events.

Example:
    class Flashcard(AggregateRoot[FlashcardProps, FlashcardId]):
        @property
        def id(self) -> FlashcardId:
            return self.props["id"]

        def validate(self, props: FlashcardProps) -> ValidationResult:
            return bool(props.get("question")) and bool(props.get("answer"))

        def update_content(self, question: str, answer: str) -> "Flashcard":
            updated = self.evolve(question=question, answer=answer)
            return updated.add_event(FlashcardUpdated(self.id.raw_id))

    flashcard = flashcard.update_content("Q", "A").publish_events(bus)
"""

import copy
import logging
from collections.abc import Callable, Iterable
from typing import Any, Generic, Self

import structlog

from .domain_event import DomainEvent
from .entity import Entity, IdType, PropsType
from .types import DomainEventEmitter

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)


class AggregateRoot(Entity[PropsType, IdType], Generic[PropsType, IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots are:
    - Entry point to an aggregate (cluster of related entities)
    - Responsible for maintaining invariants
    - The only entity referenced from outside the aggregate
    - Buffers of domain events, kept in the order they were added

    Pending events survive evolve and are only dropped by publish_events
    (after delivery) or clear_events (without delivery).
    """

    def __init__(self, props: PropsType, events: Iterable[DomainEvent[Any]] | None = None) -> None:
        super().__init__(props)
        self._events: tuple[DomainEvent[Any], ...] = tuple(events or ())

    @property
    def events(self) -> tuple[DomainEvent[Any], ...]:
        """Pending events, oldest first."""
        return self._events

    def add_event(self, event: DomainEvent[Any]) -> Self:
        """Return a new aggregate with event appended to the buffer."""
        return self._with_events((*self._events, event))

    def publish_events(self, emitter: DomainEventEmitter | Callable[[DomainEvent[Any]], None]) -> Self:
        """
        Deliver every pending event and return a new aggregate with none pending.

        Each event is passed to the emitter in one call, oldest first. If the
        emitter raises, the exception propagates and no new aggregate is
        returned; this instance still holds all of its events.

        Args:
            emitter: Object with an ``emit(event)`` method, or a callable
                taking the event

        Returns:
            Aggregate with the same props and an empty event buffer
        """
        emit = getattr(emitter, "emit", emitter)
        for event in self._events:
            emit(event)

        logger.debug(
            "domain_events_published",
            aggregate=self.__class__.__name__,
            aggregate_id=self.id.raw_id,
            event_count=len(self._events),
        )
        return self.clear_events()

    def clear_events(self) -> Self:
        """Return a new aggregate with the same props and no pending events."""
        return self._with_events(())

    def _derive(self, props: Any) -> Self:
        return type(self)._from_props(props)._with_events(self._events)

    def _with_events(self, events: tuple[DomainEvent[Any], ...]) -> Self:
        # Props are already validated and frozen, so the copy shares them.
        clone = copy.copy(self)
        object.__setattr__(clone, "_events", events)
        return clone


Aggregate = AggregateRoot
