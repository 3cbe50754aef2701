"""Tests for the chronicle error hierarchy."""

import pytest

from chronicle.domain import (
    AggregateNotFoundError,
    AggregateRootEntity,
    DuplicateHandlerError,
    InvalidStateError,
)
from chronicle.domain.errors import DOMAIN, DOMAIN_INVALID_STATE, DomainError
from chronicle.errors import (
    INTERNAL_ERROR,
    ChronicleError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)
from chronicle.event_store import EventStoreError, VersionConflictError
from chronicle.event_store.errors import EVENT_STORE, EVENT_STORE_VERSION_CONFLICT
from chronicle.uow import DuplicateIdentifierError, UnitOfWorkError


class CustomError(ChronicleError):
    pass


def test_chronicle_error_cannot_be_instantiated_directly() -> None:
    with pytest.raises(TypeError):
        ChronicleError("boom")


def test_subclass_defaults() -> None:
    error = CustomError("boom")

    assert error.message == "boom"
    assert error.code == INTERNAL_ERROR
    assert error.severity == ErrorSeverity.ERROR
    assert error.context == {}
    assert str(error) == "INTERNAL_ERROR: boom"


def test_code_must_be_an_error_code() -> None:
    with pytest.raises(TypeError):
        CustomError("boom", code="INTERNAL_ERROR")  # type: ignore[arg-type]


def test_kwargs_are_merged_into_context() -> None:
    error = CustomError("boom", context={"a": 1}, b=2)

    assert error.context == {"a": 1, "b": 2}
    assert error.add_context("c", 3) is error
    assert error.context["c"] == 3


def test_to_dict() -> None:
    error = CustomError("boom", severity=ErrorSeverity.WARNING, key="value")

    data = error.to_dict()

    assert data["code"] == "INTERNAL_ERROR"
    assert data["message"] == "boom"
    assert data["category"] == "INTERNAL"
    assert data["severity"] == "warning"
    assert data["context"] == {"key": "value"}
    assert "timestamp" in data


def test_registry_returns_existing_entries() -> None:
    category = ErrorCategory.get_or_create("TEST_CATEGORY")
    code = ErrorCode.get_or_create("TEST_CODE", category)

    assert ErrorCategory.get_or_create("TEST_CATEGORY") is category
    assert ErrorCode.get_or_create("TEST_CODE", category) is code
    assert ErrorCode.get_by_code("TEST_CODE") is code
    assert code in ErrorCode.filter_by_category(category)


def test_get_by_code_missing() -> None:
    with pytest.raises(ValueError):
        ErrorCode.get_by_code("NO_SUCH_CODE")

    assert ErrorCode.get_by_code("NO_SUCH_CODE", raise_if_missing=False) is None


def test_subcategories() -> None:
    parent = ErrorCategory.get_or_create("TEST_PARENT")
    child = ErrorCategory.get_or_create("TEST_CHILD", parent)
    code = ErrorCode.get_or_create("TEST_CHILD_CODE", child)

    assert child.is_subcategory_of(parent)
    assert not parent.is_subcategory_of(child)
    assert code in ErrorCode.filter_by_category(parent)


def test_invalid_state_error() -> None:
    error = InvalidStateError("bad state", aggregate_type="Order")

    assert isinstance(error, DomainError)
    assert error.code == DOMAIN_INVALID_STATE
    assert error.category == DOMAIN
    assert error.severity == ErrorSeverity.CRITICAL
    assert error.context == {"aggregate_type": "Order"}


def test_duplicate_handler_error() -> None:
    error = DuplicateHandlerError(int, AggregateRootEntity)

    assert isinstance(error, InvalidStateError)
    assert error.event_type is int
    assert error.aggregate_type is AggregateRootEntity
    assert "int" in error.message
    assert "AggregateRootEntity" in error.message


def test_aggregate_not_found_error() -> None:
    error = AggregateNotFoundError("order/1", AggregateRootEntity)

    assert error.identifier == "order/1"
    assert error.aggregate_type is AggregateRootEntity
    assert error.severity == ErrorSeverity.WARNING
    assert error.context["identifier"] == "order/1"
    assert "order/1" in str(error)


def test_duplicate_identifier_error() -> None:
    error = DuplicateIdentifierError("order/1")

    assert isinstance(error, UnitOfWorkError)
    assert error.identifier == "order/1"


def test_version_conflict_error() -> None:
    error = VersionConflictError("s", 1, 3)

    assert isinstance(error, EventStoreError)
    assert error.code == EVENT_STORE_VERSION_CONFLICT
    assert error.category == EVENT_STORE
    assert error.context == {"stream_id": "s", "expected_version": 1, "actual_version": 3}
