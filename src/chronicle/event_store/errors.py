# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
event_store.errors
Event store error definitions for chronicle
"""

from __future__ import annotations

from typing import Any, Final

from chronicle.errors.base import (
    ChronicleError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)

# Define error category and codes
EVENT_STORE = ErrorCategory.get_or_create("EVENT_STORE")
EVENT_STORE_ERROR: Final = ErrorCode.get_or_create("EVENT_STORE_ERROR", EVENT_STORE)
EVENT_STORE_VERSION_CONFLICT: Final = ErrorCode.get_or_create(
    "EVENT_STORE_VERSION_CONFLICT", EVENT_STORE
)
EVENT_STORE_STREAM_DELETED: Final = ErrorCode.get_or_create(
    "EVENT_STORE_STREAM_DELETED", EVENT_STORE
)
EVENT_STORE_SERIALIZATION_ERROR: Final = ErrorCode.get_or_create(
    "EVENT_STORE_SERIALIZATION_ERROR", EVENT_STORE
)


class EventStoreError(ChronicleError):
    """Base class for all event store-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = EVENT_STORE_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class VersionConflictError(EventStoreError):
    """Raised when an append's expected version does not match the stream.

    Another writer appended to the stream after it was read. The caller
    decides whether to reload and retry or to give up.
    """

    def __init__(
        self, stream_id: str, expected_version: int, actual_version: int
    ) -> None:
        self.stream_id = stream_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"Version conflict for stream '{stream_id}'. "
            f"Expected {expected_version}, got {actual_version}",
            code=EVENT_STORE_VERSION_CONFLICT,
            stream_id=stream_id,
            expected_version=expected_version,
            actual_version=actual_version,
        )


class StreamDeletedError(EventStoreError):
    """Raised when writing to a stream that has been deleted."""

    def __init__(self, stream_id: str) -> None:
        self.stream_id = stream_id
        super().__init__(
            f"Stream '{stream_id}' has been deleted",
            code=EVENT_STORE_STREAM_DELETED,
            stream_id=stream_id,
        )


class EventSerializationError(EventStoreError):
    """Raised when an event cannot be encoded or decoded."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = EVENT_STORE_SERIALIZATION_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )
