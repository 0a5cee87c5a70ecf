# SPDX-License-Identifier: MIT

from calgrid.color import PRESET_COLORS
from calgrid.configuration import Configuration
from calgrid.template.calendar_configuration import (
    get_calendar_configuration_template,
)

CONFIG_VERSION = 1


def get_configuration_template() -> Configuration:
    calendar = get_calendar_configuration_template()
    return {
        "interval_minutes": calendar["interval_minutes"],
        "start_hour": calendar["start_hour"],
        "end_hour": calendar["end_hour"],
        "auto_height": calendar["auto_height"],
        "show_overlapping": calendar["show_overlapping"],
        "overscan": 5,
        "is_mobile": False,
        "show_header": True,
        "log_level": "WARNING",
        "precompute_colors": list(PRESET_COLORS),
        "config_version": CONFIG_VERSION,
    }
