# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Domain-specific error classes for chronicle.
"""

from __future__ import annotations

from typing import Any, Final

from chronicle.errors.base import (
    ChronicleError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)

DOMAIN = ErrorCategory.get_or_create("DOMAIN")
DOMAIN_INVALID_STATE: Final = ErrorCode.get_or_create("DOMAIN_INVALID_STATE", DOMAIN)
DOMAIN_DUPLICATE_HANDLER: Final = ErrorCode.get_or_create(
    "DOMAIN_DUPLICATE_HANDLER", DOMAIN
)
DOMAIN_AGGREGATE_NOT_FOUND: Final = ErrorCode.get_or_create(
    "DOMAIN_AGGREGATE_NOT_FOUND", DOMAIN
)


class DomainError(ChronicleError):
    """Base class for all domain-related errors."""


class InvalidStateError(DomainError):
    """Raised when an object is asked to do something its current state forbids.

    This signals a mistake in the calling code (for example initializing an
    aggregate that already recorded changes), not bad data.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = DOMAIN_INVALID_STATE,
        severity: ErrorSeverity = ErrorSeverity.CRITICAL,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message, code=code, severity=severity, context=context, **kwargs
        )


class DuplicateHandlerError(InvalidStateError):
    """Raised when a second handler is registered for the same event type."""

    def __init__(self, event_type: type, aggregate_type: type) -> None:
        self.event_type = event_type
        self.aggregate_type = aggregate_type
        super().__init__(
            f"A handler for {event_type.__name__} is already registered "
            f"on {aggregate_type.__name__}",
            code=DOMAIN_DUPLICATE_HANDLER,
            event_type=event_type.__name__,
            aggregate_type=aggregate_type.__name__,
        )


class AggregateNotFoundError(DomainError):
    """Raised when no event stream exists for the requested aggregate."""

    def __init__(self, identifier: str, aggregate_type: type) -> None:
        self.identifier = identifier
        self.aggregate_type = aggregate_type
        super().__init__(
            f"The {aggregate_type.__name__} aggregate with identifier "
            f"'{identifier}' was not found",
            code=DOMAIN_AGGREGATE_NOT_FOUND,
            severity=ErrorSeverity.WARNING,
            identifier=identifier,
            aggregate_type=aggregate_type.__name__,
        )
