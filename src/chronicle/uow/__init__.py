# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""Unit of Work pattern: per-transaction tracking of in-flight aggregates.

This module provides the registry that keeps at most one aggregate per
identifier while a command is handled, and the record that pairs each
aggregate root with its stream identifier and expected version.
"""

from chronicle.uow.aggregate import Aggregate
from chronicle.uow.errors import DuplicateIdentifierError, UnitOfWorkError
from chronicle.uow.unit_of_work import UnitOfWork

__all__ = [
    "Aggregate",
    "UnitOfWork",
    # Exceptions
    "DuplicateIdentifierError",
    "UnitOfWorkError",
]
