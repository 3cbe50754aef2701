# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Event-sourced repository for chronicle aggregates.

The repository rebuilds aggregates by replaying their event stream and hands
them out through the unit of work, so every identifier resolves to a single
in-flight instance per transaction. It never writes to the event store; see
``UnitOfWorkCommitter`` for the append side.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Generic, TypeVar, get_args, get_type_hints

from chronicle.domain.aggregate import AggregateRootEntity
from chronicle.domain.errors import AggregateNotFoundError
from chronicle.event_store.config import EventReaderConfiguration
from chronicle.event_store.models import ExpectedVersion, SliceReadStatus
from chronicle.event_store.protocols import EventStoreConnectionProtocol
from chronicle.logging import LoggerProtocol, get_logger
from chronicle.optional import Optional
from chronicle.uow.aggregate import Aggregate
from chronicle.uow.unit_of_work import UnitOfWork

T = TypeVar("T", bound=AggregateRootEntity)


def _infer_aggregate_type(root_factory: Callable[[], Any]) -> type | None:
    if inspect.isclass(root_factory):
        return root_factory
    try:
        return_type = get_type_hints(root_factory).get("return")
    except (NameError, TypeError):
        return_type = None
    if inspect.isclass(return_type):
        return return_type
    return None


class Repository(Generic[T]):
    """Loads event-sourced aggregates and tracks them in a unit of work.

    Example:
        repository = Repository(Order, unit_of_work, connection, configuration)
        order = await repository.get("order/42")
        order.ship()
    """

    def __init__(
        self,
        root_factory: Callable[[], T],
        unit_of_work: UnitOfWork,
        connection: EventStoreConnectionProtocol,
        configuration: EventReaderConfiguration | None = None,
        *,
        aggregate_type: type[T] | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """
        Args:
            root_factory: Zero-argument callable returning a pristine aggregate root
            unit_of_work: The unit of work tracking the current transaction
            connection: The event store connection to read streams from
            configuration: Read configuration; built from the environment if omitted
            aggregate_type: Type reported when an aggregate is not found;
                inferred from ``root_factory`` if omitted
            logger: Optional logger instance

        Raises:
            ValueError: If ``root_factory``, ``unit_of_work`` or ``connection`` is None
        """
        if root_factory is None:
            raise ValueError("root_factory cannot be None")
        if unit_of_work is None:
            raise ValueError("unit_of_work cannot be None")
        if connection is None:
            raise ValueError("connection cannot be None")

        self._root_factory = root_factory
        self._unit_of_work = unit_of_work
        self._connection = connection
        self._configuration = configuration or EventReaderConfiguration.default()
        self._aggregate_type = aggregate_type or _infer_aggregate_type(root_factory)
        self._logger = logger or get_logger("chronicle.event_store.repository")

    @property
    def unit_of_work(self) -> UnitOfWork:
        return self._unit_of_work

    @property
    def configuration(self) -> EventReaderConfiguration:
        return self._configuration

    @property
    def aggregate_type(self) -> type:
        """Type reported in ``AggregateNotFoundError``.

        Taken from the ``aggregate_type`` argument or the factory; otherwise
        from the subscription in ``Repository[Order](...)``, and failing that
        ``AggregateRootEntity``.
        """
        if self._aggregate_type is not None:
            return self._aggregate_type
        # set by typing after __init__ returns, only for subscripted construction
        for argument in get_args(getattr(self, "__orig_class__", None)):
            if inspect.isclass(argument):
                return argument
        return AggregateRootEntity

    async def get(self, identifier: str) -> T:
        """Return the aggregate root with the given identifier.

        Raises:
            ValueError: If ``identifier`` is None or empty
            AggregateNotFoundError: If the aggregate's stream does not exist,
                was deleted or holds no events
        """
        root = await self._load(identifier)
        if root is None:
            raise AggregateNotFoundError(identifier, self.aggregate_type)
        return root

    async def get_optional(self, identifier: str) -> Optional[T]:
        """Return the aggregate root with the given identifier, if it exists.

        Raises:
            ValueError: If ``identifier`` is None or empty
        """
        root = await self._load(identifier)
        if root is None:
            return Optional.empty()
        return Optional(root)

    def add(self, identifier: str, root: T) -> None:
        """Track a newly created aggregate whose stream does not exist yet.

        Raises:
            ValueError: If ``identifier`` or ``root`` is None
            DuplicateIdentifierError: If ``identifier`` is already tracked
        """
        if identifier is None:
            raise ValueError("identifier cannot be None")
        if root is None:
            raise ValueError("root cannot be None")
        self._unit_of_work.attach(Aggregate(identifier, ExpectedVersion.NO_STREAM, root))

    async def _load(self, identifier: str) -> T | None:
        if not identifier:
            raise ValueError("identifier cannot be None or empty")

        tracked = self._unit_of_work.try_get(identifier)
        if tracked is not None:
            self._logger.debug(
                "Aggregate found in unit of work", identifier=identifier
            )
            return tracked.root  # type: ignore[return-value]

        stream_id = self._configuration.stream_name_resolver(identifier)
        deserializer = self._configuration.deserializer
        events: list[Any] = []
        start = 0
        while True:
            page = await self._connection.read_stream_forward(
                stream_id, start, self._configuration.slice_size
            )
            if page.status in (
                SliceReadStatus.STREAM_NOT_FOUND,
                SliceReadStatus.STREAM_DELETED,
            ):
                return None
            events.extend(deserializer.deserialize(recorded) for recorded in page.events)
            if page.is_end_of_stream:
                break
            start = page.next_event_number

        if not events:
            return None

        root = self._root_factory()
        root.initialize(events)
        self._unit_of_work.attach(Aggregate(identifier, page.last_event_number, root))
        self._logger.debug(
            "Aggregate replayed from stream",
            identifier=identifier,
            stream_id=stream_id,
            event_count=len(events),
            version=page.last_event_number,
        )
        return root
