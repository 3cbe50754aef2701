# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
event_store.memory
In-memory event store implementation for chronicle
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from datetime import UTC, datetime

from chronicle.event_store.errors import StreamDeletedError, VersionConflictError
from chronicle.event_store.models import (
    EventData,
    ExpectedVersion,
    RecordedEvent,
    SliceReadStatus,
    StreamEventsSlice,
    WriteResult,
)
from chronicle.logging import LoggerProtocol, get_logger


class InMemoryEventStoreConnection:
    """In-memory implementation of the event store connection.

    This implementation is primarily intended for testing and development
    purposes. It maintains all state in memory and does not persist data
    between restarts.
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        self._logger = logger or get_logger("chronicle.event_store.memory")
        self._streams: dict[str, list[RecordedEvent]] = {}
        self._deleted: set[str] = set()
        self._lock = asyncio.Lock()

    def _current_version(self, stream_id: str) -> int:
        return len(self._streams.get(stream_id, ())) - 1

    async def read_stream_forward(
        self,
        stream_id: str,
        start: int = 0,
        count: int = 500,
    ) -> StreamEventsSlice:
        """Read up to ``count`` events from ``stream_id`` starting at ``start``."""
        if not stream_id:
            raise ValueError("stream_id cannot be None or empty")
        if start < 0:
            raise ValueError("start cannot be negative")
        if count < 1:
            raise ValueError("count must be at least 1")

        if stream_id in self._deleted:
            return self._empty_slice(SliceReadStatus.STREAM_DELETED, stream_id, start)
        if stream_id not in self._streams:
            return self._empty_slice(SliceReadStatus.STREAM_NOT_FOUND, stream_id, start)

        recorded = self._streams[stream_id]
        events = tuple(recorded[start : start + count])
        last_event_number = len(recorded) - 1
        next_event_number = start + len(events)
        return StreamEventsSlice(
            status=SliceReadStatus.SUCCESS,
            stream_id=stream_id,
            from_event_number=start,
            events=events,
            next_event_number=next_event_number,
            last_event_number=last_event_number,
            is_end_of_stream=next_event_number > last_event_number,
        )

    async def append_to_stream(
        self,
        stream_id: str,
        expected_version: int,
        events: Sequence[EventData],
    ) -> WriteResult:
        """Append events to a stream.

        Raises:
            VersionConflictError: If the expected version does not match
            StreamDeletedError: If the stream was deleted
        """
        if not stream_id:
            raise ValueError("stream_id cannot be None or empty")
        if events is None:
            raise ValueError("events cannot be None")

        async with self._lock:
            if stream_id in self._deleted:
                raise StreamDeletedError(stream_id)

            current_version = self._current_version(stream_id)
            if (
                expected_version != ExpectedVersion.ANY
                and expected_version != current_version
            ):
                raise VersionConflictError(stream_id, expected_version, current_version)

            stream = self._streams.setdefault(stream_id, [])
            created = datetime.now(UTC)
            for data in events:
                stream.append(
                    RecordedEvent(
                        stream_id=stream_id,
                        event_id=data.event_id,
                        event_number=len(stream),
                        event_type=data.event_type,
                        data=data.data,
                        metadata=data.metadata,
                        is_json=data.is_json,
                        created=created,
                    )
                )

            next_expected_version = len(stream) - 1
            self._logger.debug(
                "Appended events to stream",
                stream_id=stream_id,
                event_count=len(events),
                version=next_expected_version,
            )
            return WriteResult(next_expected_version=next_expected_version)

    async def delete_stream(
        self,
        stream_id: str,
        expected_version: int = ExpectedVersion.ANY,
    ) -> None:
        """Delete a stream; it can no longer be read or written."""
        if not stream_id:
            raise ValueError("stream_id cannot be None or empty")

        async with self._lock:
            if stream_id in self._deleted:
                raise StreamDeletedError(stream_id)
            current_version = self._current_version(stream_id)
            if (
                expected_version != ExpectedVersion.ANY
                and expected_version != current_version
            ):
                raise VersionConflictError(stream_id, expected_version, current_version)
            self._streams.pop(stream_id, None)
            self._deleted.add(stream_id)

    def delete_all_streams(self) -> None:
        """Forget every stream, including deleted ones."""
        self._streams.clear()
        self._deleted.clear()

    @staticmethod
    def _empty_slice(
        status: SliceReadStatus, stream_id: str, start: int
    ) -> StreamEventsSlice:
        return StreamEventsSlice(
            status=status,
            stream_id=stream_id,
            from_event_number=start,
            next_event_number=start,
            last_event_number=ExpectedVersion.NO_STREAM,
            is_end_of_stream=True,
        )
