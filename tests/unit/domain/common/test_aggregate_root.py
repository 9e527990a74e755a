"""Tests for the AggregateRoot base class."""

from collections.abc import Iterable
from typing import Any
from unittest.mock import Mock, call

import pytest

from devkit_ddd import (
    Aggregate,
    AggregateRoot,
    ArgumentInvalidError,
    DomainEvent,
    EntityId,
    ValidationResult,
)


class PersonId(EntityId[str]):
    @property
    def raw_id(self) -> str:
        return self.value

    def validate(self, value: str) -> ValidationResult:
        return None


class Person(AggregateRoot[dict[str, Any], PersonId]):
    # composite from props
    @property
    def id(self) -> PersonId:
        return PersonId(f"{self.props['name']}-{self.props['age']}")

    def validate(self, props: dict[str, Any]) -> ValidationResult:
        if props.get("age", 0) < 0:
            return "Age must not be negative"
        return None

    def celebrate_birthday(self) -> "Person":
        older = self.evolve(age=self.props["age"] + 1)
        return older.add_event(BirthdayCelebrated(older.id.raw_id, payload={"age": older.props["age"]}))


class Employee(Person):
    pass


class ImportedPerson(Person):
    def __init__(
        self, props: dict[str, Any], source: str, events: Iterable[DomainEvent[Any]] | None = None
    ) -> None:
        super().__init__(props, events)
        self.source = source

    @classmethod
    def _from_props(cls, props: Any) -> "ImportedPerson":
        return cls(props, source="evolved")


class BirthdayCelebrated(DomainEvent[dict[str, Any]]):
    def validate_payload(self, payload: dict[str, Any] | None) -> ValidationResult:
        return None


def make_events(count: int = 2) -> list[BirthdayCelebrated]:
    return [BirthdayCelebrated("aggregate-id") for _ in range(count)]


class TestConstruction:
    """Test suite for aggregate construction."""

    def test_without_events(self) -> None:
        person = Person({"name": "foo", "age": 123})

        assert isinstance(person, Person)
        assert person.events == ()

    def test_with_events(self) -> None:
        events = make_events()
        person = Person({"name": "foo", "age": 123}, events)

        assert person.events == tuple(events)
        assert isinstance(person.events, tuple)

    def test_events_from_any_iterable(self) -> None:
        events = make_events(3)
        person = Person({"name": "foo", "age": 123}, iter(events))
        assert person.events == tuple(events)

    def test_props_are_validated(self) -> None:
        with pytest.raises(ArgumentInvalidError, match="Age must not be negative"):
            Person({"name": "foo", "age": -1})

    def test_aggregate_alias(self) -> None:
        assert Aggregate is AggregateRoot


class TestEvolve:
    """Test suite for evolve on aggregates."""

    def test_keeps_pending_events(self) -> None:
        events = make_events()
        original = Person({"name": "foo", "age": 123}, events)

        updated = original.evolve({"name": "bar"})

        assert updated is not original
        assert updated.props == {"name": "bar", "age": 123}
        assert updated.events == tuple(events)

    def test_recipe_keeps_pending_events(self) -> None:
        events = make_events()
        original = Person({"name": "foo", "age": 123}, events)

        updated = original.evolve(lambda draft: draft.update(age=124))

        assert updated.props["age"] == 124
        assert updated.events == tuple(events)

    def test_concrete_subclass_is_preserved(self) -> None:
        updated = Employee({"name": "foo", "age": 1}).evolve(age=2)
        assert type(updated) is Employee

    def test_subclass_with_extra_constructor_argument(self) -> None:
        events = make_events()
        original = ImportedPerson({"name": "foo", "age": 1}, source="csv", events=events)

        updated = original.evolve(age=2)

        assert type(updated) is ImportedPerson
        assert updated.source == "evolved"
        assert updated.props == {"name": "foo", "age": 2}
        assert updated.events == tuple(events)
        assert original.source == "csv"

    def test_subclass_with_extra_constructor_argument_keeps_it_across_events(self) -> None:
        original = ImportedPerson({"name": "foo", "age": 1}, source="csv")

        updated = original.add_event(BirthdayCelebrated("aggregate-id")).clear_events()

        assert type(updated) is ImportedPerson
        assert updated.source == "csv"

    def test_domain_behaviour_records_events(self) -> None:
        person = Person({"name": "foo", "age": 30})

        older = person.celebrate_birthday()

        assert older.props["age"] == 31
        assert len(older.events) == 1
        assert older.events[0].aggregate_id == "foo-31"
        assert older.events[0].payload == {"age": 31}
        assert person.events == ()


class TestAddEvent:
    """Test suite for add_event."""

    def test_appends_at_the_tail(self) -> None:
        events = make_events()
        original = Person({"name": "foo", "age": 123}, events)
        new_event = BirthdayCelebrated("aggregate-id")

        updated = original.add_event(new_event)

        assert updated is not original
        assert updated.events == (*events, new_event)
        assert original.events == tuple(events)

    def test_keeps_props_and_type(self) -> None:
        original = Employee({"name": "foo", "age": 123})

        updated = original.add_event(BirthdayCelebrated("aggregate-id"))

        assert type(updated) is Employee
        assert updated.props == original.props
        assert updated == original


class TestPublishEvents:
    """Test suite for publish_events."""

    def test_delivers_events_in_order(self, emitter: Any) -> None:
        events = make_events(3)
        original = Person({"name": "foo", "age": 123}, events)

        original.publish_events(emitter)

        assert emitter.emitted == events

    def test_one_call_per_event(self) -> None:
        events = make_events()
        original = Person({"name": "foo", "age": 123}, events)
        mock_emitter = Mock(spec=["emit"])

        original.publish_events(mock_emitter)

        assert mock_emitter.emit.call_count == 2
        assert mock_emitter.emit.call_args_list == [call(events[0]), call(events[1])]

    def test_returns_new_instance_without_events(self, emitter: Any) -> None:
        events = make_events()
        original = Person({"name": "foo", "age": 123}, events)

        updated = original.publish_events(emitter)

        assert updated is not original
        assert updated.events == ()
        assert updated.props == original.props
        assert original.events == tuple(events)

    def test_accepts_a_plain_callable(self) -> None:
        events = make_events()
        delivered: list[DomainEvent[Any]] = []

        Person({"name": "foo", "age": 123}, events).publish_events(delivered.append)

        assert delivered == events

    def test_nothing_pending(self, emitter: Any) -> None:
        updated = Person({"name": "foo", "age": 123}).publish_events(emitter)

        assert emitter.emitted == []
        assert updated.events == ()

    def test_emitter_failure_propagates(self, failing_emitter: Any) -> None:
        events = make_events(3)
        original = Person({"name": "foo", "age": 123}, events)

        with pytest.raises(RuntimeError, match="emitter is down"):
            original.publish_events(failing_emitter)

        assert failing_emitter.emitted == events[:2]
        assert original.events == tuple(events)

    def test_delivery_is_logged(self, emitter: Any, captured_logs: list[dict[str, Any]]) -> None:
        Person({"name": "foo", "age": 123}, make_events()).publish_events(emitter)

        assert captured_logs == [
            {
                "event": "domain_events_published",
                "aggregate": "Person",
                "aggregate_id": "foo-123",
                "event_count": 2,
                "log_level": "debug",
            }
        ]


class TestClearEvents:
    """Test suite for clear_events."""

    def test_drops_events_without_delivery(self) -> None:
        events = make_events()
        original = Person({"name": "foo", "age": 123}, events)

        updated = original.clear_events()

        assert updated is not original
        assert updated.events == ()
        assert original.events == tuple(events)

    def test_keeps_props(self) -> None:
        original = Person({"name": "foo", "age": 123}, make_events())
        assert original.clear_events().props == original.props


class TestEqualityAndJson:
    """Test suite for identity and export."""

    def test_different_ids_are_not_equal(self) -> None:
        assert Person({"name": "foo", "age": 1}) != Person({"name": "bar", "age": 1})

    def test_events_do_not_affect_equality(self) -> None:
        assert Person({"name": "foo", "age": 1}, make_events()) == Person({"name": "foo", "age": 1})

    def test_to_json_exports_props_only(self) -> None:
        person = Person({"name": "foo", "age": 123}, make_events())
        assert person.to_json() == {"name": "foo", "age": 123}
