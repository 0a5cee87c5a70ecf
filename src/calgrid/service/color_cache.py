# SPDX-License-Identifier: MIT

import logging
import threading
from typing import Iterable, Optional

from calgrid.color import default_palette, derive_palette, normalize_color
from calgrid.errors import InvalidColorFormat
from calgrid.model.color_palette import ColorCacheStats, ColorPalette

logger = logging.getLogger(__name__)

# Rough per-entry footprint reported by stats()
ESTIMATED_ENTRY_SIZE_KB = 0.5


class ColorVariantCache:
    """
    Memoized palettes keyed by normalized base color.

    A palette is derived once per unique color and then shared by reference;
    callers must treat returned palettes as read-only. Inserts are serialized
    with a lock so concurrent renders can share one cache; two threads racing
    on the same color both derive it but only the first palette is stored.

    Colors that cannot be parsed resolve to the default palette and are not
    stored.
    """

    def __init__(self) -> None:
        self._palettes: dict[str, ColorPalette] = {}
        self._lock = threading.Lock()
        self._default_palette = default_palette()

    def __len__(self) -> int:
        return len(self._palettes)

    def __contains__(self, color: object) -> bool:
        key = self._key(color)
        return key is not None and key in self._palettes

    def _key(self, color: object) -> Optional[str]:
        try:
            return normalize_color(color)  # type: ignore[arg-type]
        except InvalidColorFormat:
            return None

    def get(self, color: Optional[str]) -> ColorPalette:
        """Return the palette of a color, deriving and storing it on first use."""
        try:
            key = normalize_color(color)  # type: ignore[arg-type]
        except InvalidColorFormat as e:
            logger.warning("%s; using the default palette", e)
            return self._default_palette

        palette = self._palettes.get(key)
        if palette is not None:
            return palette

        palette = derive_palette(key)
        with self._lock:
            palette = self._palettes.setdefault(key, palette)
        logger.debug("derived palette for %s", key)
        return palette

    def precompute(self, colors: Iterable[Optional[str]]) -> int:
        """
        Derive the palettes of a batch of colors ahead of the first render.

        Returns:
            The number of palettes that were not cached before
        """
        size_before = len(self._palettes)
        for color in colors:
            self.get(color)
        added = len(self._palettes) - size_before
        logger.debug("precomputed %d palettes", added)
        return added

    def clear(self) -> None:
        with self._lock:
            self._palettes.clear()

    def stats(self) -> ColorCacheStats:
        with self._lock:
            keys = list(self._palettes.keys())
        return {
            "size": len(keys),
            "keys": keys,
            "memory_estimate_kb": len(keys) * ESTIMATED_ENTRY_SIZE_KB,
        }


COLOR_CACHE = ColorVariantCache()
