"""Top-level pytest configuration for chronicle."""

from uuid import uuid4

import pytest

from chronicle.event_store import InMemoryEventStoreConnection, PydanticEventSerializer
from chronicle.uow import UnitOfWork


@pytest.fixture
def connection() -> InMemoryEventStoreConnection:
    """A fresh, empty in-memory event store."""
    return InMemoryEventStoreConnection()


@pytest.fixture
def serializer() -> PydanticEventSerializer:
    return PydanticEventSerializer()


@pytest.fixture
def unit_of_work() -> UnitOfWork:
    return UnitOfWork()


@pytest.fixture
def known_identifier() -> str:
    return f"aggregate/{uuid4()}"


@pytest.fixture
def unknown_identifier() -> str:
    return f"aggregate/{uuid4()}"
