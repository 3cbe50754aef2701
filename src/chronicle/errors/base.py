# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Base error classes for chronicle.

Every error raised by the library carries an error code, the category that
code belongs to, a severity and a free-form context dictionary.
"""

from __future__ import annotations

import threading
from datetime import UTC, datetime
from enum import Enum
from typing import Any, ClassVar, Final


class ErrorSeverity(str, Enum):
    """How serious an error is; carried on every ChronicleError."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorCategory:
    """A named, optionally nested, group of error codes."""

    _categories: ClassVar[dict[str, ErrorCategory]] = {}
    _lock: ClassVar[threading.RLock] = threading.RLock()

    def __init__(self, name: str, parent: ErrorCategory | None = None) -> None:
        self.name = name
        self.parent = parent

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ErrorCategory({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCategory):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def is_subcategory_of(self, category: ErrorCategory) -> bool:
        """True for ``category`` itself and for any category nested below it."""
        current: ErrorCategory | None = self
        while current:
            if current == category:
                return True
            current = current.parent
        return False

    @classmethod
    def get_or_create(
        cls, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        """Return the registered category called ``name``, registering it first if needed."""
        with cls._lock:
            if name not in cls._categories:
                cls._categories[name] = cls(name, parent)
            return cls._categories[name]


INTERNAL: Final = ErrorCategory.get_or_create("INTERNAL")


class ErrorCode:
    """An error code and the category it belongs to."""

    _codes: ClassVar[dict[str, ErrorCode]] = {}
    _lock: ClassVar[threading.RLock] = threading.RLock()

    def __init__(self, code: str, category: ErrorCategory = INTERNAL) -> None:
        self.code = code
        self.category = category

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.category.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCode):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    @classmethod
    def get_by_code(
        cls, code: str, *, raise_if_missing: bool = True
    ) -> ErrorCode | None:
        """Look up a registered code.

        Raises:
            ValueError: If ``code`` is unknown and ``raise_if_missing`` is set
        """
        error_code = cls._codes.get(code)
        if error_code is None and raise_if_missing:
            raise ValueError(f"Error code '{code}' not found in registry")
        return error_code

    @classmethod
    def filter_by_category(cls, category: ErrorCategory) -> list[ErrorCode]:
        """Error codes belonging to the category or any of its subcategories."""
        return [
            code
            for code in cls._codes.values()
            if code.category.is_subcategory_of(category)
        ]

    @classmethod
    def get_or_create(cls, name: str, category: ErrorCategory) -> ErrorCode:
        """Return the registered code ``name``, registering it under ``category`` first if needed."""
        with cls._lock:
            if name not in cls._codes:
                cls._codes[name] = cls(name, category)
            return cls._codes[name]


INTERNAL_ERROR: Final = ErrorCode.get_or_create("INTERNAL_ERROR", INTERNAL)


class ChronicleError(Exception):
    """
    Root of every exception chronicle raises.
    Each package defines its own subclasses, codes and category; the base
    class itself cannot be raised.
    """

    message: str
    code: ErrorCode
    category: ErrorCategory
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> ChronicleError:
        if cls is ChronicleError:
            raise TypeError(
                "Do not instantiate ChronicleError directly; subclass it for specific errors."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode = INTERNAL_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Args:
            message: What went wrong, for humans
            code: Registered code; its category becomes ``self.category``
            severity: How serious the error is
            context: Structured details, e.g. identifiers and versions
            **kwargs: Extra context keys, merged into ``context``
        """
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        full_context = dict(context or {})
        full_context.update(kwargs)

        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> ChronicleError:
        """Record one more context entry; returns ``self``."""
        self.context[key] = value
        return self

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view of the error, for logs and API payloads."""
        return {
            "code": self.code.code,
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.value,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }
