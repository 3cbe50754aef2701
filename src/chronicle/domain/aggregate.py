# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Aggregate root base class for event-sourced domain models.

An aggregate's state is never written directly. Domain methods describe what
happened by applying events; each event is routed to the handler registered
for its exact type, and recorded as a change that the surrounding unit of
work later appends to the aggregate's stream. Rebuilding an aggregate from
its stream goes through ``initialize`` instead, which routes events to the
same handlers without recording them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from chronicle.domain.errors import DuplicateHandlerError, InvalidStateError

E = TypeVar("E")
F = TypeVar("F", bound=Callable[..., Any])

EventHandler = Callable[[Any], None]


def handles(event_type: type) -> Callable[[F], F]:
    """Mark an aggregate method as the handler for ``event_type``.

    Decorated methods are registered when the aggregate is constructed, in
    the order they are defined. Stacking the decorator makes one method the
    handler for several event types. A subclass that overrides a decorated
    method replaces its event types with those of the override.

    Example:
        class Order(AggregateRootEntity):
            @handles(OrderPlaced)
            def _when_placed(self, event: OrderPlaced) -> None:
                self.placed = True
    """
    if event_type is None:
        raise ValueError("event_type cannot be None")

    def decorator(handler: F) -> F:
        marked = getattr(handler, "_handles_event_types", ())
        handler._handles_event_types = (event_type, *marked)  # type: ignore[attr-defined]
        return handler

    return decorator


class AggregateRootEntity:
    """Base class for aggregate roots that track their own state changes.

    Subclasses register one handler per event type, either with ``register``
    in ``__init__`` or with the ``handles`` decorator, and mutate themselves
    only through ``_apply``.

    Example:
        class Account(AggregateRootEntity):
            def __init__(self) -> None:
                super().__init__()
                self.balance = 0
                self.register(Deposited, self._when_deposited)

            def deposit(self, amount: int) -> None:
                self._apply(Deposited(amount=amount))

            def _when_deposited(self, event: Deposited) -> None:
                self.balance += event.amount
    """

    def __init__(self) -> None:
        self._handlers: dict[type, EventHandler] = {}
        self._changes: list[Any] = []
        self._initialized = False
        self._applied = False
        self._register_decorated_handlers()

    def _register_decorated_handlers(self) -> None:
        seen: set[str] = set()
        for klass in reversed(type(self).__mro__):
            for name, member in vars(klass).items():
                if name in seen or not hasattr(member, "_handles_event_types"):
                    continue
                seen.add(name)
                # the most derived definition decides, it may be undecorated
                effective = getattr(type(self), name)
                for event_type in getattr(effective, "_handles_event_types", ()):
                    self.register(event_type, getattr(self, name))

    def register(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        """Register the handler to invoke when an event of ``event_type`` is played.

        Args:
            event_type: The exact event type the handler is for
            handler: Callable receiving the event

        Raises:
            ValueError: If ``event_type`` or ``handler`` is None
            DuplicateHandlerError: If ``event_type`` already has a handler
        """
        if event_type is None:
            raise ValueError("event_type cannot be None")
        if handler is None:
            raise ValueError("handler cannot be None")
        if event_type in self._handlers:
            raise DuplicateHandlerError(event_type, type(self))
        self._handlers[event_type] = handler

    def initialize(self, events: Iterable[Any]) -> None:
        """Rebuild state from previously recorded events.

        The events are played through the registered handlers but are not
        recorded as changes. Only a pristine instance can be initialized, and
        only once.

        Args:
            events: The events to replay, oldest first

        Raises:
            ValueError: If ``events`` is None or contains None
            InvalidStateError: If this instance was already initialized or
                has applied any event
        """
        if events is None:
            raise ValueError("events cannot be None")
        if self._applied or self.has_changes():
            raise InvalidStateError(
                "Initialize cannot be called on an instance with changes.",
                aggregate_type=type(self).__name__,
            )
        if self._initialized:
            raise InvalidStateError(
                "Initialize cannot be called more than once.",
                aggregate_type=type(self).__name__,
            )
        self._initialized = True
        for event in events:
            if event is None:
                raise ValueError("events cannot contain None")
            self._play(event)

    def _apply(self, event: Any) -> None:
        """Play ``event`` through its handler and record it as a change.

        Raises:
            ValueError: If ``event`` is None
        """
        if event is None:
            raise ValueError("event cannot be None")
        self._applied = True
        self._play(event)
        self._changes.append(event)

    def _play(self, event: Any) -> None:
        # exact type only, subclasses of a registered type are not routed
        handler = self._handlers.get(type(event))
        if handler is not None:
            handler(event)

    def has_changes(self) -> bool:
        """Whether this instance has recorded changes."""
        return len(self._changes) != 0

    def get_changes(self) -> tuple[Any, ...]:
        """The recorded changes, in the order they were applied."""
        return tuple(self._changes)

    def clear_changes(self) -> None:
        """Forget the recorded changes."""
        self._changes.clear()
