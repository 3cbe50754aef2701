# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""Configuration for reading aggregates from the event store."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chronicle.event_store.protocols import (
    EventDeserializerProtocol,
    StreamNameResolver,
)
from chronicle.event_store.serialization import PydanticEventSerializer

MAX_SLICE_SIZE: Final = 4096


class EventStoreSettings(BaseSettings):
    """Configuration settings for the event store.

    Settings can be configured via environment variables with the
    `CHRONICLE_EVENT_STORE_` prefix.
    """

    read_slice_size: int = Field(default=500, ge=1, le=MAX_SLICE_SIZE)
    resolve_unregistered_event_types: bool = True
    stream_prefix: str = ""

    model_config = SettingsConfigDict(
        env_prefix="CHRONICLE_EVENT_STORE_",
        case_sensitive=False,
        extra="ignore",
    )


def identity_resolver(identifier: str) -> str:
    """Use the aggregate identifier as the stream name."""
    return identifier


class PrefixedStreamNameResolver:
    """Prefix aggregate identifiers to form stream names."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def __call__(self, identifier: str) -> str:
        return f"{self.prefix}{identifier}"

    def __repr__(self) -> str:
        return f"PrefixedStreamNameResolver({self.prefix!r})"


class EventReaderConfiguration(BaseModel):
    """How a repository reads an aggregate's stream.

    Attributes:
        slice_size: Number of events requested per read
        deserializer: Turns recorded events back into domain events
        stream_name_resolver: Maps an aggregate identifier to a stream name
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    slice_size: int = Field(default=500, ge=1, le=MAX_SLICE_SIZE)
    deserializer: EventDeserializerProtocol
    stream_name_resolver: StreamNameResolver = identity_resolver

    @classmethod
    def default(cls) -> EventReaderConfiguration:
        """Configuration built from the ``CHRONICLE_EVENT_STORE_*`` environment."""
        return cls.from_settings(EventStoreSettings())

    @classmethod
    def from_settings(
        cls,
        settings: EventStoreSettings,
        deserializer: EventDeserializerProtocol | None = None,
        stream_name_resolver: StreamNameResolver | None = None,
    ) -> EventReaderConfiguration:
        if deserializer is None:
            deserializer = PydanticEventSerializer(
                resolve_unregistered=settings.resolve_unregistered_event_types
            )
        if stream_name_resolver is None:
            stream_name_resolver = (
                PrefixedStreamNameResolver(settings.stream_prefix)
                if settings.stream_prefix
                else identity_resolver
            )
        return cls(
            slice_size=settings.read_slice_size,
            deserializer=deserializer,
            stream_name_resolver=stream_name_resolver,
        )
