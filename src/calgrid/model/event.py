# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from calgrid.model.category import Category
from calgrid.model.entity_id import EntityId


class Event(TypedDict):
    id: EntityId
    title: Optional[str]
    description: Optional[str]
    day: pendulum.Date
    start_time: str
    end_time: str
    category: Optional[Category]
    color: Optional[str]
