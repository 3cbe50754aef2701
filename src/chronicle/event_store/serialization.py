# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
JSON event codec built on pydantic.

Events are pydantic models or dataclasses. Each event type is written to the
log under a type name, by default ``"module:QualifiedName"``, which is how the
codec finds the type again when reading.
"""

from __future__ import annotations

import importlib
from typing import Any

from pydantic import PydanticSchemaGenerationError, TypeAdapter

from chronicle.event_store.errors import EventSerializationError
from chronicle.event_store.models import EventData, RecordedEvent
from chronicle.logging import LoggerProtocol, get_logger


def default_type_name(event_type: type) -> str:
    """The name an event type is stored under unless registered otherwise."""
    return f"{event_type.__module__}:{event_type.__qualname__}"


class PydanticEventSerializer:
    """Serializes events to JSON and back using ``pydantic.TypeAdapter``.

    Example:
        serializer = PydanticEventSerializer()
        serializer.register(OrderPlaced, name="order-placed")
        data = serializer.serialize(OrderPlaced(order_id="42"))
    """

    def __init__(
        self,
        *,
        resolve_unregistered: bool = True,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """
        Args:
            resolve_unregistered: Import unknown ``module:QualifiedName`` type
                names instead of rejecting them
            logger: Optional logger instance
        """
        self._resolve_unregistered = resolve_unregistered
        self._logger = logger or get_logger("chronicle.event_store.serialization")
        self._types: dict[str, type] = {}
        self._names: dict[type, str] = {}
        self._adapters: dict[type, TypeAdapter[Any]] = {}

    def register(self, event_type: type, name: str | None = None) -> None:
        """Store ``event_type`` under ``name`` (default: ``module:QualifiedName``).

        Raises:
            ValueError: If the name is already used by another type
        """
        if event_type is None:
            raise ValueError("event_type cannot be None")
        name = name or default_type_name(event_type)
        registered = self._types.get(name)
        if registered is not None and registered is not event_type:
            raise ValueError(
                f"Event type name '{name}' is already registered for {registered.__name__}"
            )
        self._adapter(event_type)
        self._types[name] = event_type
        self._names[event_type] = name
        self._logger.debug("Registered event type", event_type=event_type, name=name)

    def name_of(self, event_type: type) -> str:
        return self._names.get(event_type) or default_type_name(event_type)

    def type_of(self, name: str) -> type:
        """Find the event type stored under ``name``.

        Raises:
            EventSerializationError: If the name is unknown
        """
        event_type = self._types.get(name)
        if event_type is not None:
            return event_type
        if not self._resolve_unregistered:
            raise EventSerializationError(
                f"Unknown event type '{name}'", event_type=name
            )
        return self._import_type(name)

    def serialize(self, event: Any) -> EventData:
        event_type = type(event)
        try:
            data = self._adapter(event_type).dump_json(event)
        except ValueError as exc:
            raise EventSerializationError(
                f"Failed to serialize event {event_type.__name__}: {exc}",
                event_type=event_type.__name__,
            ) from exc
        return EventData(event_type=self.name_of(event_type), data=data, is_json=True)

    def deserialize(self, recorded: RecordedEvent) -> Any:
        event_type = self.type_of(recorded.event_type)
        try:
            return self._adapter(event_type).validate_json(recorded.data)
        except ValueError as exc:
            raise EventSerializationError(
                f"Failed to deserialize event {recorded.event_type} "
                f"#{recorded.event_number} of stream '{recorded.stream_id}': {exc}",
                event_type=recorded.event_type,
                stream_id=recorded.stream_id,
                event_number=recorded.event_number,
            ) from exc

    def _adapter(self, event_type: type) -> TypeAdapter[Any]:
        adapter = self._adapters.get(event_type)
        if adapter is None:
            try:
                adapter = TypeAdapter(event_type)
            except PydanticSchemaGenerationError as exc:
                raise EventSerializationError(
                    f"{event_type.__name__} is not a pydantic model or dataclass",
                    event_type=event_type.__name__,
                ) from exc
            self._adapters[event_type] = adapter
        return adapter

    def _import_type(self, name: str) -> type:
        module_name, _, qualname = name.partition(":")
        if not module_name or not qualname or "<locals>" in qualname:
            raise EventSerializationError(
                f"Unknown event type '{name}'", event_type=name
            )
        try:
            target: Any = importlib.import_module(module_name)
            for attribute in qualname.split("."):
                target = getattr(target, attribute)
        except (ImportError, AttributeError) as exc:
            raise EventSerializationError(
                f"Unknown event type '{name}'", event_type=name
            ) from exc
        if not isinstance(target, type):
            raise EventSerializationError(
                f"Event type name '{name}' does not refer to a class", event_type=name
            )
        return target
