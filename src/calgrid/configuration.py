# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "calgrid"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Configuration(TypedDict):
    interval_minutes: int
    start_hour: int
    end_hour: int
    auto_height: bool
    show_overlapping: bool
    overscan: int
    is_mobile: bool
    show_header: bool
    log_level: str
    precompute_colors: Optional[list[str]]
    config_version: NotRequired[int]


def set_config_path(config_path: Path) -> None:
    """
    Point the application at another configuration directory.

    Must be called before the configuration repository first loads.
    """
    global CONFIG_PATH, APP_CONFIG_PATH

    CONFIG_PATH = config_path
    APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
