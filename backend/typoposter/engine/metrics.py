"""Text metrics — measure the tight box of a rendered text run.

The composer never hardcodes font metrics; every sizing decision is relative
to what the provider reports. A provider returns ``None`` when it cannot
measure, and callers treat that as "skip the size-dependent step".
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Protocol

from PIL import ImageFont

from typoposter.engine.scene import BoundingBox, TextRun

logger = logging.getLogger(__name__)

# Pillow anchors: left/middle horizontally, on the alphabetic baseline
_ANCHORS = {"start": "ls", "middle": "ms"}

# Runs at or above this weight use the bold face when one is configured
_BOLD_WEIGHT = 700


class TextMetrics(Protocol):
    def measure(self, run: TextRun) -> BoundingBox | None:
        """Local (untransformed) box of ``run`` in canvas units, or None."""
        ...


class PillowTextMetrics:
    """Measure text with Pillow's FreeType bindings.

    Without a font path, Pillow's bundled default face is used at the
    requested size.
    """

    def __init__(self, font_path: str = "", bold_font_path: str = "") -> None:
        self.font_path = font_path
        self.bold_font_path = bold_font_path or font_path
        self._load = lru_cache(maxsize=256)(self._load_font)

    def _load_font(self, size: int, bold: bool) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        path = self.bold_font_path if bold else self.font_path
        if path:
            return ImageFont.truetype(path, size)
        return ImageFont.load_default(size)

    def measure(self, run: TextRun) -> BoundingBox | None:
        size = max(1, int(round(run.font_size)))
        try:
            font = self._load(size, run.font_weight >= _BOLD_WEIGHT)
            left, top, right, bottom = font.getbbox(run.content, anchor=_ANCHORS.get(run.text_anchor, "ls"))
        except (OSError, ValueError) as e:
            logger.warning("Text metrics unavailable for %r at %dpx: %s", run.content, size, e)
            return None
        return BoundingBox(run.x + left, run.y + top, float(right - left), float(bottom - top))
