# SPDX-License-Identifier: MIT


class CalgridError(Exception):
    """Base class for every error raised by calgrid."""


class InvalidTimeFormat(CalgridError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Time must be in HH:MM format, got {value!r}")
        self.value = value


class InvalidTimeRange(CalgridError, ValueError):
    def __init__(self, event_id: str, start_time: str, end_time: str) -> None:
        super().__init__(
            f"Event '{event_id}' must start before it ends, "
            f"got {start_time}-{end_time}"
        )
        self.event_id = event_id
        self.start_time = start_time
        self.end_time = end_time


class MixedDayEvents(CalgridError, ValueError):
    def __init__(self, days: list[str]) -> None:
        super().__init__(
            f"Events must all belong to the same day, got {', '.join(days)}"
        )
        self.days = days


class DuplicateEventId(CalgridError, ValueError):
    def __init__(self, event_id: str) -> None:
        super().__init__(f"Event id '{event_id}' appears more than once")
        self.event_id = event_id


class InvalidColorFormat(CalgridError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Color must be a hex color like #3B82F6, got {value!r}")
        self.value = value


class MissingCategory(CalgridError, LookupError):
    def __init__(self, event_id: str) -> None:
        super().__init__(f"Event '{event_id}' has no category")
        self.event_id = event_id


class InvalidCalendarConfiguration(CalgridError, ValueError):
    pass


class InvalidViewport(CalgridError, ValueError):
    pass
