# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Append the changes tracked by a unit of work to the event store.
"""

from __future__ import annotations

from chronicle.event_store.config import identity_resolver
from chronicle.event_store.protocols import (
    EventSerializerProtocol,
    EventStoreConnectionProtocol,
    StreamNameResolver,
)
from chronicle.logging import LoggerProtocol, get_logger
from chronicle.uow.unit_of_work import UnitOfWork


class UnitOfWorkCommitter:
    """Writes every changed aggregate of a unit of work to its stream.

    Each aggregate is appended with its own expected version, so a conflict
    on one stream is detected independently of the others. A conflict is
    raised as ``VersionConflictError`` and is not retried; aggregates
    appended before it keep their new versions, the conflicting one and
    those after it keep their changes.
    """

    def __init__(
        self,
        connection: EventStoreConnectionProtocol,
        serializer: EventSerializerProtocol,
        stream_name_resolver: StreamNameResolver | None = None,
        *,
        logger: LoggerProtocol | None = None,
    ) -> None:
        if connection is None:
            raise ValueError("connection cannot be None")
        if serializer is None:
            raise ValueError("serializer cannot be None")
        self._connection = connection
        self._serializer = serializer
        self._stream_name_resolver = stream_name_resolver or identity_resolver
        self._logger = logger or get_logger("chronicle.event_store.commit")

    async def commit(self, unit_of_work: UnitOfWork) -> None:
        """Append pending changes and advance each aggregate's expected version.

        Raises:
            ValueError: If ``unit_of_work`` is None
            VersionConflictError: If a stream moved since its aggregate was read
        """
        if unit_of_work is None:
            raise ValueError("unit_of_work cannot be None")

        for aggregate in unit_of_work.get_changes():
            stream_id = self._stream_name_resolver(aggregate.identifier)
            changes = aggregate.root.get_changes()
            events = [self._serializer.serialize(change) for change in changes]
            result = await self._connection.append_to_stream(
                stream_id, aggregate.expected_version, events
            )
            aggregate.expected_version = result.next_expected_version
            aggregate.root.clear_changes()
            self._logger.debug(
                "Committed aggregate changes",
                identifier=aggregate.identifier,
                stream_id=stream_id,
                event_count=len(events),
                version=result.next_expected_version,
            )
