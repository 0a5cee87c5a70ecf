# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from calgrid.model.category import Category
from calgrid.model.event import Event
from calgrid.template.event import get_event_template
from calgrid.time import date_from_value


class EventFileRepository:
    """Read-only view of the events listed in a YAML file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._events: Optional[list[Event]] = None

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        raw = load(self.path.read_text(), Loader=Loader)
        if raw is None:
            self._events = []
            return
        if not isinstance(raw, dict) or not isinstance(raw.get("events"), list):
            raise ValueError(f"{self.path} must contain a top-level 'events' list")

        self._events = [
            self.__convert_event_for_deserialization(raw_event, position)
            for position, raw_event in enumerate(raw["events"])
        ]

    def __convert_event_for_deserialization(
        self, raw_event: Any, position: int
    ) -> Event:
        if not isinstance(raw_event, dict):
            raise ValueError(f"Event #{position} must be a mapping, got {raw_event!r}")
        for key in ("start_time", "end_time"):
            if key not in raw_event:
                raise ValueError(f"Event #{position} has no {key}")

        event = get_event_template(str(raw_event.get("id", position)))
        event["title"] = raw_event.get("title")
        event["description"] = raw_event.get("description")
        if "day" in raw_event:
            event["day"] = date_from_value(raw_event["day"])
        # YAML reads unquoted 9:00 as a sexagesimal integer, so quote times
        event["start_time"] = str(raw_event["start_time"])
        event["end_time"] = str(raw_event["end_time"])
        event["color"] = raw_event.get("color")
        event["category"] = self.__convert_category(
            raw_event.get("category"), position
        )
        return event

    def __convert_category(
        self, raw_category: Any, position: int
    ) -> Optional[Category]:
        if raw_category is None:
            return None
        if not isinstance(raw_category, dict):
            raise ValueError(
                f"Category of event #{position} must be a mapping, "
                f"got {raw_category!r}"
            )
        return {
            "id": str(raw_category.get("id", raw_category.get("name", ""))),
            "name": str(raw_category.get("name", "")),
            "color": str(raw_category.get("color", "")),
            "icon": raw_category.get("icon"),
        }
