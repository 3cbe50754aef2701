# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: chronicle
"""
Tracking record for an aggregate root inside a unit of work.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from chronicle.domain.aggregate import AggregateRootEntity


class Aggregate(BaseModel):
    """Associates an aggregate root with its stream identifier and the stream
    version it was read at.

    ``expected_version`` is the optimistic concurrency token used when the
    root's changes are appended; it moves forward after every successful
    append. The root is held by reference, never copied.
    """

    identifier: str = Field(min_length=1, frozen=True)
    expected_version: int
    root: AggregateRootEntity = Field(frozen=True)

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
    )

    def __init__(
        self, identifier: str, expected_version: int, root: AggregateRootEntity
    ) -> None:
        super().__init__(
            identifier=identifier, expected_version=expected_version, root=root
        )

    def has_changes(self) -> bool:
        return self.root.has_changes()
