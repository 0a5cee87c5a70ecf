"""Rendering state shared by the inspection views."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

from calgrid.service.color_cache import COLOR_CACHE, ColorVariantCache

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Palette cache the views color events with; the process-wide one unless swapped
_palette_cache_var: ContextVar[ColorVariantCache] = ContextVar(
    "palette_cache", default=COLOR_CACHE
)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_palette_cache(cache: ColorVariantCache) -> None:
    """Render subsequent views with another palette cache.

    Args:
        cache: The cache later palette lookups should read and fill
    """
    _palette_cache_var.set(cache)


def get_palette_cache() -> ColorVariantCache:
    return _palette_cache_var.get()
