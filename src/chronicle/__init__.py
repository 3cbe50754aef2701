# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
chronicle: event-sourced aggregates, a unit of work that tracks them, and a
repository that rebuilds them from an append-only event log.
"""

from chronicle.domain import (
    AggregateNotFoundError,
    AggregateRootEntity,
    DuplicateHandlerError,
    InvalidStateError,
    handles,
)
from chronicle.event_store import (
    ExpectedVersion,
    Repository,
    UnitOfWorkCommitter,
    VersionConflictError,
)
from chronicle.optional import Optional
from chronicle.uow import Aggregate, DuplicateIdentifierError, UnitOfWork

__version__ = "0.1.0"

__all__ = [
    "Aggregate",
    "AggregateNotFoundError",
    "AggregateRootEntity",
    "DuplicateHandlerError",
    "DuplicateIdentifierError",
    "ExpectedVersion",
    "InvalidStateError",
    "Optional",
    "Repository",
    "UnitOfWork",
    "UnitOfWorkCommitter",
    "VersionConflictError",
    "handles",
]
