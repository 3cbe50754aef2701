# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Presence or absence of a lookup result.

``Optional`` is returned by lookups that may legitimately find nothing, such
as ``Repository.get_optional``. It is either the shared empty instance or
wraps exactly one non-``None`` value.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, ClassVar, Generic, TypeVar

from chronicle.domain.errors import InvalidStateError

T = TypeVar("T")


class Optional(Generic[T]):
    """A value that may be absent.

    Example:
        result = await repository.get_optional("order/42")
        if result:
            order = result.value
    """

    __slots__ = ("_has_value", "_value")

    _empty: ClassVar[Optional[Any]]

    def __init__(self, value: T) -> None:
        if value is None:
            raise ValueError("value cannot be None, use Optional.empty() instead")
        self._has_value = True
        self._value = value

    @classmethod
    def empty(cls) -> Optional[Any]:
        """Return the shared empty instance."""
        return Optional._empty

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def value(self) -> T:
        """The wrapped value.

        Raises:
            InvalidStateError: If this instance is empty
        """
        if not self._has_value:
            raise InvalidStateError("Optional has no value")
        return self._value

    def value_or(self, default: T) -> T:
        return self._value if self._has_value else default

    def __bool__(self) -> bool:
        return self._has_value

    def __iter__(self) -> Iterator[T]:
        if self._has_value:
            yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        if not self._has_value or not other._has_value:
            return self._has_value == other._has_value
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        if not self._has_value:
            return 0
        return hash(self._value)

    def __repr__(self) -> str:
        if not self._has_value:
            return "Optional.empty()"
        return f"Optional({self._value!r})"


def _create_empty() -> Optional[Any]:
    empty = object.__new__(Optional)
    empty._has_value = False
    empty._value = None
    return empty


Optional._empty = _create_empty()
