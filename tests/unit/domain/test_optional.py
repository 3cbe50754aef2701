"""Tests for Optional."""

import pytest

from chronicle.domain import InvalidStateError
from chronicle.optional import Optional


def test_empty_is_a_shared_instance() -> None:
    assert Optional.empty() is Optional.empty()


def test_empty_has_no_value() -> None:
    empty = Optional.empty()

    assert empty.has_value is False
    assert not empty
    assert list(empty) == []


def test_empty_value_raises() -> None:
    with pytest.raises(InvalidStateError):
        Optional.empty().value


def test_empty_value_or_returns_default() -> None:
    assert Optional.empty().value_or("fallback") == "fallback"


def test_value_cannot_be_none() -> None:
    with pytest.raises(ValueError):
        Optional(None)


def test_wrapped_value_is_returned_by_reference() -> None:
    value = object()
    result = Optional(value)

    assert result.has_value is True
    assert result
    assert result.value is value
    assert result.value_or(object()) is value
    assert list(result) == [value]


def test_falsy_values_are_present() -> None:
    assert Optional(0).has_value is True
    assert Optional("").has_value is True


def test_equality() -> None:
    assert Optional(1) == Optional(1)
    assert Optional(1) != Optional(2)
    assert Optional(1) != Optional.empty()
    assert Optional.empty() == Optional.empty()
    assert hash(Optional("a")) == hash(Optional("a"))


def test_repr() -> None:
    assert repr(Optional.empty()) == "Optional.empty()"
    assert repr(Optional(3)) == "Optional(3)"
