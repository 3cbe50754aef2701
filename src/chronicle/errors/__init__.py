# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""Error handling primitives shared by every chronicle package."""

from chronicle.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ChronicleError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)

__all__ = [
    "INTERNAL",
    "INTERNAL_ERROR",
    "ChronicleError",
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
]
