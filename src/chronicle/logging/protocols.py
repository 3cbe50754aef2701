# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Logging interface used throughout chronicle.

Components accept any object satisfying ``LoggerProtocol`` so that callers can
hand in their own logger; when none is given they create one with
``chronicle.logging.get_logger``.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """
    Protocol defining the interface for loggers in chronicle.

    Keyword arguments are structured context attached to the record.
    """

    def debug(self, msg: str, **kwargs: Any) -> None: ...

    def info(self, msg: str, **kwargs: Any) -> None: ...

    def warning(self, msg: str, **kwargs: Any) -> None: ...

    def error(self, msg: str, **kwargs: Any) -> None: ...

    def critical(self, msg: str, **kwargs: Any) -> None: ...

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """Return a logger that adds ``kwargs`` to every record."""
        ...
