# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from calgrid.errors import MissingCategory
from calgrid.model.category import Category
from calgrid.model.color_palette import ColorPalette
from calgrid.model.event import Event
from calgrid.service.color_cache import COLOR_CACHE, ColorVariantCache
from calgrid.template.category import get_uncategorized_category

logger = logging.getLogger(__name__)


def require_category(event: Event) -> Category:
    """
    Raises:
        MissingCategory: If the event references no category
    """
    category = event.get("category")
    if category is None:
        raise MissingCategory(event["id"])
    return category


def resolve_category(event: Event) -> Category:
    """Return the event's category, or the uncategorized category when it has none."""
    try:
        return require_category(event)
    except MissingCategory as e:
        logger.warning("%s; rendering it as uncategorized", e)
        return get_uncategorized_category()


def resolve_event_color(event: Event) -> str:
    """The event's own color override if set, else its category color."""
    override: Optional[str] = event.get("color")
    if override:
        return override
    return resolve_category(event)["color"]


def event_palette(
    event: Event, cache: ColorVariantCache = COLOR_CACHE
) -> ColorPalette:
    return cache.get(resolve_event_color(event))


def collect_event_colors(events: list[Event]) -> list[str]:
    """Unique effective colors of the events, in first-seen order."""
    return list(dict.fromkeys(resolve_event_color(event) for event in events))
