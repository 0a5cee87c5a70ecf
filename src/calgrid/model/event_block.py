# SPDX-License-Identifier: MIT

from typing import TypedDict

from calgrid.model.entity_id import EntityId


class EventBlock(TypedDict):
    event_id: EntityId
    top: float
    height: float
    left_fraction: float
    width_fraction: float
