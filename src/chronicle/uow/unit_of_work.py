# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
In-memory unit of work for one business transaction.

A unit of work tracks every aggregate loaded or created while handling a
single command. It guarantees that an identifier maps to at most one
in-flight aggregate, so two reads of the same stream hand back the same
object, and lets a commit step find every aggregate with pending changes.

Instances are not thread-safe; create one per transaction.
"""

from __future__ import annotations

from collections.abc import Iterator

from chronicle.uow.aggregate import Aggregate
from chronicle.uow.errors import DuplicateIdentifierError


class UnitOfWork:
    """Registry of the aggregates in flight within one transaction."""

    def __init__(self) -> None:
        self._tracked: dict[str, Aggregate] = {}

    def attach(self, aggregate: Aggregate) -> None:
        """Start tracking ``aggregate``.

        Raises:
            ValueError: If ``aggregate`` is None
            DuplicateIdentifierError: If its identifier is already tracked
        """
        if aggregate is None:
            raise ValueError("aggregate cannot be None")
        if aggregate.identifier in self._tracked:
            raise DuplicateIdentifierError(aggregate.identifier)
        self._tracked[aggregate.identifier] = aggregate

    def try_get(self, identifier: str) -> Aggregate | None:
        """Return the tracked aggregate for ``identifier``, if any.

        Raises:
            ValueError: If ``identifier`` is None or empty
        """
        if not identifier:
            raise ValueError("identifier cannot be None or empty")
        return self._tracked.get(identifier)

    def has_changes(self) -> bool:
        """Whether any tracked aggregate has pending changes."""
        return any(aggregate.has_changes() for aggregate in self._tracked.values())

    def get_changes(self) -> list[Aggregate]:
        """Tracked aggregates with pending changes, in the order they were attached."""
        return [
            aggregate
            for aggregate in self._tracked.values()
            if aggregate.has_changes()
        ]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._tracked

    def __iter__(self) -> Iterator[Aggregate]:
        return iter(list(self._tracked.values()))

    def __len__(self) -> int:
        return len(self._tracked)
