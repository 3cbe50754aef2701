# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Domain building blocks: the event-sourced aggregate root and its errors.
"""

from chronicle.domain.aggregate import AggregateRootEntity, handles
from chronicle.domain.errors import (
    AggregateNotFoundError,
    DomainError,
    DuplicateHandlerError,
    InvalidStateError,
)

__all__ = [
    "AggregateRootEntity",
    "handles",
    "AggregateNotFoundError",
    "DomainError",
    "DuplicateHandlerError",
    "InvalidStateError",
]
