# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
event_store.models
Records exchanged with an append-only log of named streams
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Final
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ExpectedVersion:
    """Special expected versions for ``append_to_stream``.

    Any other value is the number of the last event the writer saw; event
    numbers start at 0, so a stream holding one event is at version 0.
    """

    ANY: Final = -2
    NO_STREAM: Final = -1


class SliceReadStatus(str, Enum):
    """Outcome of reading a slice of a stream."""

    SUCCESS = "success"
    STREAM_NOT_FOUND = "stream_not_found"
    STREAM_DELETED = "stream_deleted"


class EventData(BaseModel):
    """An event ready to be appended to a stream."""

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    event_type: str = Field(min_length=1)
    data: bytes
    metadata: bytes = b""
    is_json: bool = True


class RecordedEvent(BaseModel):
    """An event as stored in a stream."""

    model_config = ConfigDict(frozen=True)

    stream_id: str
    event_id: UUID
    event_number: int = Field(ge=0)
    event_type: str
    data: bytes
    metadata: bytes = b""
    is_json: bool = True
    created: datetime = Field(default_factory=lambda: datetime.now(UTC))


class StreamEventsSlice(BaseModel):
    """A page of events read forward from a stream."""

    model_config = ConfigDict(frozen=True)

    status: SliceReadStatus
    stream_id: str
    from_event_number: int
    events: tuple[RecordedEvent, ...] = ()
    next_event_number: int
    last_event_number: int
    is_end_of_stream: bool


class WriteResult(BaseModel):
    """Result of a successful append."""

    model_config = ConfigDict(frozen=True)

    next_expected_version: int
