# SPDX-License-Identifier: MIT

from typing import TypedDict

from calgrid.model.entity_id import EntityId


class ColumnAssignment(TypedDict):
    event_id: EntityId
    column: int
    total_columns: int
    width_fraction: float
