# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""Given/When/Then helpers for testing event-sourced aggregates."""

from chronicle.testing.runner import (
    EventCentricTestSpecificationRunner,
    SpecificationFailedError,
)
from chronicle.testing.scenario import (
    GivenStateBuilder,
    Scenario,
    ThenStateBuilder,
    ThrowStateBuilder,
    WhenStateBuilder,
)
from chronicle.testing.specification import EventCentricTestSpecification, Fact

__all__ = [
    "Scenario",
    "GivenStateBuilder",
    "WhenStateBuilder",
    "ThenStateBuilder",
    "ThrowStateBuilder",
    "EventCentricTestSpecification",
    "EventCentricTestSpecificationRunner",
    "Fact",
    "SpecificationFailedError",
]
