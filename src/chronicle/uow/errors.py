# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""Unit of Work exceptions."""

from __future__ import annotations

from typing import Any, Final

from chronicle.errors.base import (
    ChronicleError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)

UNIT_OF_WORK = ErrorCategory.get_or_create("UNIT_OF_WORK")
UNIT_OF_WORK_ERROR: Final = ErrorCode.get_or_create("UNIT_OF_WORK_ERROR", UNIT_OF_WORK)
UNIT_OF_WORK_DUPLICATE_IDENTIFIER: Final = ErrorCode.get_or_create(
    "UNIT_OF_WORK_DUPLICATE_IDENTIFIER", UNIT_OF_WORK
)


class UnitOfWorkError(ChronicleError):
    """Base exception for all UoW related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = UNIT_OF_WORK_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message, code=code, severity=severity, context=context, **kwargs
        )


class DuplicateIdentifierError(UnitOfWorkError):
    """Raised when an aggregate is attached under an identifier already tracked."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(
            f"The aggregate with identifier '{identifier}' was already "
            "attached to this unit of work",
            code=UNIT_OF_WORK_DUPLICATE_IDENTIFIER,
            identifier=identifier,
        )
