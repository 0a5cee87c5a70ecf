"""
Pytest configuration and shared fixtures.
Provides event builders, isolated caches and a throwaway config directory.
"""

from pathlib import Path
from typing import Callable, Optional, TypeAlias

import pendulum
import pytest

from calgrid import configuration
from calgrid.model.category import Category
from calgrid.model.event import Event
from calgrid.repository.configuration import CONFIGURATION_REPO
from calgrid.service.color_cache import ColorVariantCache
from calgrid.template.calendar_configuration import (
    get_calendar_configuration_template,
)

DAY = pendulum.date(2026, 10, 19)

EventFactory: TypeAlias = Callable[..., Event]


# ==================== Event Fixtures ====================

@pytest.fixture
def day() -> pendulum.Date:
    return DAY


@pytest.fixture
def work_category() -> Category:
    return {"id": "work", "name": "work", "color": "#3B82F6", "icon": None}


@pytest.fixture
def make_event() -> EventFactory:
    """Build events with sensible defaults for everything but the times."""

    def _make_event(
        event_id: str,
        start_time: str,
        end_time: str,
        day: pendulum.Date = DAY,
        category: Optional[Category] = None,
        color: Optional[str] = None,
        title: Optional[str] = None,
    ) -> Event:
        return {
            "id": event_id,
            "title": title if title is not None else f"event {event_id}",
            "description": None,
            "day": day,
            "start_time": start_time,
            "end_time": end_time,
            "category": category,
            "color": color,
        }

    return _make_event


# ==================== Component Fixtures ====================

@pytest.fixture
def cache() -> ColorVariantCache:
    """A cache isolated from the process-wide default instance."""
    return ColorVariantCache()


@pytest.fixture
def calendar_config():
    return get_calendar_configuration_template()


@pytest.fixture
def config_dir(tmp_path: Path):
    """Point the configuration repository at a temporary directory."""
    original_path = configuration.CONFIG_PATH
    configuration.set_config_path(tmp_path / "config")
    CONFIGURATION_REPO.reset()

    yield configuration.CONFIG_PATH

    configuration.set_config_path(original_path)
    CONFIGURATION_REPO.reset()
