# SPDX-License-Identifier: MIT

from calgrid.model.calendar_configuration import CalendarConfiguration


def get_calendar_configuration_template() -> CalendarConfiguration:
    return {
        "interval_minutes": 30,
        "start_hour": 5,
        "end_hour": 23,
        "auto_height": True,
        "show_overlapping": True,
    }
