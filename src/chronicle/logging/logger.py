# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Structured logger used by chronicle components.

Keyword arguments given to a logging call travel with the record and are
rendered after the message as ``key=value`` pairs, or as JSON fields.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
import uuid
from collections.abc import Generator
from contextvars import ContextVar
from typing import Any

from chronicle.logging.config import LoggingSettings
from chronicle.logging.level import LogLevel
from chronicle.logging.protocols import LoggerProtocol

# merged into every record formatted while set, see ChronicleLogger.context
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

CONTEXT_ATTRIBUTE = "chronicle_context"


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        # keep key=value pairs splittable on whitespace
        if " " in value:
            return f'"{value}"'
        return value
    if isinstance(value, datetime.datetime | datetime.date):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, type):
        return value.__name__
    try:
        return json.dumps(value)
    except TypeError:
        return str(value)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, datetime.datetime | datetime.date):
        return obj.isoformat()
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, type):
        return obj.__name__
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    return str(obj)


class StructuredFormatter(logging.Formatter):
    """Renders ``message [LEVEL] key=value ...`` lines, or one JSON object per record."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """
        Args:
            json_format: Emit JSON objects instead of text lines
            include_timestamp: Prefix text lines with, or add to JSON, the record time
            include_level: Render the level name
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        extra: dict[str, Any] = dict(_log_context.get())
        extra.update(getattr(record, CONTEXT_ATTRIBUTE, None) or {})

        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        if not extra:
            return message
        ctx_str = " ".join(f"{k}={_format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "name": record.name,
            **extra,
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])
        return json.dumps(log_data, default=_json_default, ensure_ascii=False)


class ChronicleLogger:
    """Thin wrapper over a ``logging.Logger`` that accepts structured context.

    Constructing one (re)installs the handlers described by the settings on
    the named stdlib logger and stops propagation to the root logger.
    """

    def __init__(
        self,
        name: str,
        settings: LoggingSettings | None = None,
        *,
        configure: bool = True,
    ) -> None:
        """
        Args:
            name: Logger name
            settings: Handler and format settings, read from the environment if omitted
            configure: Install handlers; ``bind`` passes False to share them
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = {}
        if configure:
            self._configure()

    def _configure(self) -> None:
        self._logger.setLevel(LogLevel.from_string(self._settings.level).to_stdlib_level())

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )

        if self._settings.console_enabled:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if self._settings.file_enabled and self._settings.file_path:
            file_handler = logging.FileHandler(self._settings.file_path)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = False

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        exc_info = kwargs.pop("exc_info", None)
        context = {**self._bound_context, **kwargs}
        self._logger.log(
            level, msg, exc_info=exc_info, extra={CONTEXT_ATTRIBUTE: context}
        )

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, msg, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        self._logger.setLevel(level.to_stdlib_level())

    def bind(self, **kwargs: Any) -> ChronicleLogger:
        """Return a logger that adds ``kwargs`` to every record it emits.

        The new logger shares the underlying standard library logger and its
        handlers.
        """
        logger = ChronicleLogger(self.name, settings=self._settings, configure=False)
        logger._bound_context = {**self._bound_context, **kwargs}
        return logger

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None, None, None]:
        """Add ``kwargs`` to every record formatted inside the block.

        The context lives in a ``ContextVar`` and so follows asyncio tasks.
        """
        token = _log_context.set({**_log_context.get(), **kwargs})
        try:
            yield
        finally:
            _log_context.reset(token)


def get_logger(
    name: str,
    level: LogLevel | None = None,
    settings: LoggingSettings | None = None,
) -> LoggerProtocol:
    """Build a ``ChronicleLogger`` for ``name``.

    Args:
        name: Dotted logger name, e.g. ``chronicle.event_store.memory``
        level: Overrides the level from the settings
        settings: Read from ``CHRONICLE_LOGGING_*`` when omitted

    Returns:
        Configured logger instance
    """
    logger = ChronicleLogger(name, settings=settings or LoggingSettings.load())
    if level is not None:
        logger.set_level(level)
    return logger
