# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
event_store.protocols
Contracts between chronicle and the event log it reads from and writes to
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

from chronicle.event_store.models import (
    EventData,
    ExpectedVersion,
    RecordedEvent,
    StreamEventsSlice,
    WriteResult,
)

StreamNameResolver = Callable[[str], str]


class EventStoreConnectionProtocol(Protocol):
    """Protocol for a connection to an append-only log of named streams."""

    async def read_stream_forward(
        self,
        stream_id: str,
        start: int = 0,
        count: int = 500,
    ) -> StreamEventsSlice:
        """Read up to ``count`` events from ``stream_id`` starting at ``start``.

        A stream that does not exist is reported through the slice status,
        not raised.
        """
        ...

    async def append_to_stream(
        self,
        stream_id: str,
        expected_version: int,
        events: Sequence[EventData],
    ) -> WriteResult:
        """Append events to a stream.

        Raises:
            VersionConflictError: If ``expected_version`` is neither
                ``ExpectedVersion.ANY`` nor the stream's current version
        """
        ...

    async def delete_stream(
        self,
        stream_id: str,
        expected_version: int = ExpectedVersion.ANY,
    ) -> None:
        """Delete a stream."""
        ...


@runtime_checkable
class EventSerializerProtocol(Protocol):
    """Encodes domain events into records the event log accepts."""

    def serialize(self, event: Any) -> EventData: ...


@runtime_checkable
class EventDeserializerProtocol(Protocol):
    """Decodes recorded events back into domain events."""

    def deserialize(self, recorded: RecordedEvent) -> Any: ...
