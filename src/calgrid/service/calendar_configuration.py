# SPDX-License-Identifier: MIT

from typing import Any, Mapping, cast

from calgrid.errors import InvalidCalendarConfiguration
from calgrid.model.calendar_configuration import (
    INTERVAL_MINUTES_CHOICES,
    CalendarConfiguration,
)
from calgrid.template.calendar_configuration import (
    get_calendar_configuration_template,
)


def validate_calendar_configuration(config: CalendarConfiguration) -> None:
    """
    Raises:
        InvalidCalendarConfiguration: If the interval is not 15, 30 or 60
            minutes, or the hour range is not within 0..23 with start <= end
    """
    interval = config["interval_minutes"]
    if interval not in INTERVAL_MINUTES_CHOICES:
        raise InvalidCalendarConfiguration(
            f"Interval must be one of {', '.join(map(str, INTERVAL_MINUTES_CHOICES))} "
            f"minutes, got {interval}"
        )

    start_hour = config["start_hour"]
    end_hour = config["end_hour"]
    if not 0 <= start_hour <= 23:
        raise InvalidCalendarConfiguration(
            f"Start hour must be between 0 and 23, got {start_hour}"
        )
    if not 0 <= end_hour <= 23:
        raise InvalidCalendarConfiguration(
            f"End hour must be between 0 and 23, got {end_hour}"
        )
    if start_hour > end_hour:
        raise InvalidCalendarConfiguration(
            f"Start hour ({start_hour}) must not be after end hour ({end_hour})"
        )


def build_calendar_configuration(
    overrides: Mapping[str, Any] | None = None,
) -> CalendarConfiguration:
    """
    Merge overrides onto the default calendar configuration and validate it.

    Keys that are not calendar settings are ignored, so a whole application
    configuration can be passed in.
    """
    config = get_calendar_configuration_template()
    if overrides is not None:
        for key in config:
            value = overrides.get(key)
            if value is not None:
                config[key] = value  # type: ignore[literal-required]

    validate_calendar_configuration(config)
    return cast(CalendarConfiguration, config)
