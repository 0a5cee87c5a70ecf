# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from calgrid import configuration
from calgrid.model.calendar_configuration import CalendarConfiguration
from calgrid.service.calendar_configuration import build_calendar_configuration
from calgrid.template.configuration import get_configuration_template


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = get_configuration_template()

        if not configuration.APP_CONFIG_PATH.is_file():
            return

        stored = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if stored is None:
            return

        # Keys missing from older files keep their template defaults
        for key, value in stored.items():
            if key in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Forget the loaded configuration so the next access reads the file again."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_calendar_configuration(self) -> CalendarConfiguration:
        return build_calendar_configuration(self.config)

    def update_config(
        self,
        interval_minutes: Optional[int] = None,
        start_hour: Optional[int] = None,
        end_hour: Optional[int] = None,
        auto_height: Optional[bool] = None,
        show_overlapping: Optional[bool] = None,
        overscan: Optional[int] = None,
        is_mobile: Optional[bool] = None,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
        precompute_colors: Optional[list[str]] = None,
        remove_precompute_colors: bool = False,
    ) -> None:
        updated = self.get_config()

        if interval_minutes is not None:
            updated["interval_minutes"] = interval_minutes
        if start_hour is not None:
            updated["start_hour"] = start_hour
        if end_hour is not None:
            updated["end_hour"] = end_hour
        if auto_height is not None:
            updated["auto_height"] = auto_height
        if show_overlapping is not None:
            updated["show_overlapping"] = show_overlapping
        if overscan is not None:
            updated["overscan"] = overscan
        if is_mobile is not None:
            updated["is_mobile"] = is_mobile
        if show_header is not None:
            updated["show_header"] = show_header
        if log_level is not None:
            updated["log_level"] = log_level.upper()
        if precompute_colors is not None:
            updated["precompute_colors"] = precompute_colors
        if remove_precompute_colors:
            updated["precompute_colors"] = None

        # Reject an invalid calendar before it reaches the file
        build_calendar_configuration(updated)

        self._config = updated
        self.is_dirty = True


CONFIGURATION_REPO = ConfigurationRepository()
