# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle

"""
Public API for the chronicle logging system.

Structured logging on top of the standard library ``logging`` module.
"""

from __future__ import annotations

from chronicle.logging.config import LoggingSettings
from chronicle.logging.level import LogLevel
from chronicle.logging.logger import ChronicleLogger, StructuredFormatter, get_logger
from chronicle.logging.protocols import LoggerProtocol

__all__ = [
    # Core interfaces
    "LoggerProtocol",
    "LogLevel",
    # Implementation
    "ChronicleLogger",
    "StructuredFormatter",
    # Settings
    "LoggingSettings",
    # Factory functions
    "get_logger",
]
