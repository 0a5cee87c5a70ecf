# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from calgrid.model.entity_id import EntityId


class Category(TypedDict):
    id: EntityId
    name: str
    color: str
    icon: Optional[str]
