# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Event store integration: the event log contract, an in-memory log, the JSON
event codec, and the repository and commit step built on them.
"""

from chronicle.event_store.commit import UnitOfWorkCommitter
from chronicle.event_store.config import (
    EventReaderConfiguration,
    EventStoreSettings,
    PrefixedStreamNameResolver,
    identity_resolver,
)
from chronicle.event_store.errors import (
    EventSerializationError,
    EventStoreError,
    StreamDeletedError,
    VersionConflictError,
)
from chronicle.event_store.memory import InMemoryEventStoreConnection
from chronicle.event_store.models import (
    EventData,
    ExpectedVersion,
    RecordedEvent,
    SliceReadStatus,
    StreamEventsSlice,
    WriteResult,
)
from chronicle.event_store.protocols import (
    EventDeserializerProtocol,
    EventSerializerProtocol,
    EventStoreConnectionProtocol,
    StreamNameResolver,
)
from chronicle.event_store.repository import Repository
from chronicle.event_store.serialization import PydanticEventSerializer

__all__ = [
    # Contract
    "EventStoreConnectionProtocol",
    "EventSerializerProtocol",
    "EventDeserializerProtocol",
    "StreamNameResolver",
    "EventData",
    "ExpectedVersion",
    "RecordedEvent",
    "SliceReadStatus",
    "StreamEventsSlice",
    "WriteResult",
    # Implementations
    "InMemoryEventStoreConnection",
    "PydanticEventSerializer",
    "Repository",
    "UnitOfWorkCommitter",
    # Configuration
    "EventReaderConfiguration",
    "EventStoreSettings",
    "PrefixedStreamNameResolver",
    "identity_resolver",
    # Exceptions
    "EventSerializationError",
    "EventStoreError",
    "StreamDeletedError",
    "VersionConflictError",
]
