"""Tests for the Aggregate tracking record."""

import pytest
from pydantic import ValidationError

from chronicle.domain import AggregateRootEntity
from chronicle.event_store import ExpectedVersion
from chronicle.uow import Aggregate


class ChangingRoot(AggregateRootEntity):
    def change(self) -> None:
        self._apply(object())


def test_properties_return_constructor_values() -> None:
    root = ChangingRoot()

    sut = Aggregate("order/1", 4, root)

    assert sut.identifier == "order/1"
    assert sut.expected_version == 4
    assert sut.root is root


def test_identifier_cannot_be_empty() -> None:
    with pytest.raises(ValidationError):
        Aggregate("", ExpectedVersion.NO_STREAM, ChangingRoot())


def test_identifier_cannot_be_none() -> None:
    with pytest.raises(ValidationError):
        Aggregate(None, ExpectedVersion.NO_STREAM, ChangingRoot())  # type: ignore[arg-type]


def test_root_cannot_be_none() -> None:
    with pytest.raises(ValidationError):
        Aggregate("order/1", ExpectedVersion.NO_STREAM, None)  # type: ignore[arg-type]


def test_root_must_be_an_aggregate_root_entity() -> None:
    with pytest.raises(ValidationError):
        Aggregate("order/1", ExpectedVersion.NO_STREAM, object())  # type: ignore[arg-type]


def test_identifier_is_frozen() -> None:
    sut = Aggregate("order/1", 0, ChangingRoot())

    with pytest.raises(ValidationError):
        sut.identifier = "order/2"


def test_expected_version_can_move_forward() -> None:
    sut = Aggregate("order/1", ExpectedVersion.NO_STREAM, ChangingRoot())

    sut.expected_version = 2

    assert sut.expected_version == 2


def test_has_changes_follows_the_root() -> None:
    root = ChangingRoot()
    sut = Aggregate("order/1", 0, root)

    assert sut.has_changes() is False
    root.change()
    assert sut.has_changes() is True
