# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Configuration for the chronicle logging system.

Settings are read from ``CHRONICLE_LOGGING_*`` environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chronicle.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    """Where chronicle log records go and how they are rendered.

    Every field can be set through a ``CHRONICLE_LOGGING_<FIELD>`` variable,
    e.g. ``CHRONICLE_LOGGING_LEVEL=debug``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHRONICLE_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default=LogLevel.INFO.value, description="Minimum level emitted")
    json_format: bool = Field(default=False, description="Render records as JSON objects")
    include_timestamp: bool = Field(default=True, description="Prefix records with asctime")
    include_level: bool = Field(default=True, description="Render the level name")
    console_enabled: bool = Field(default=True, description="Write records to stdout")
    file_enabled: bool = Field(default=False, description="Also write records to file_path")
    file_path: str | None = Field(default=None, description="Target of the file handler")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        """Accept a ``LogLevel`` or a level name in any case."""
        if isinstance(v, LogLevel):
            return v.value
        if not isinstance(v, str):
            raise ValueError(f"level must be a level name, got {type(v).__name__}")
        return LogLevel.from_string(v).value

    @classmethod
    def load(cls) -> LoggingSettings:
        """Read the settings from the environment."""
        return cls()
