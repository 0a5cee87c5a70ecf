# SPDX-License-Identifier: MIT

from calgrid.model.event import Event
from calgrid.model.entity_id import EntityId
from calgrid.time import today_local


def get_event_template(event_id: EntityId) -> Event:
    return {
        "id": event_id,
        "title": None,
        "description": None,
        "day": today_local(),
        "start_time": "00:00",
        "end_time": "01:00",
        "category": None,
        "color": None,
    }
