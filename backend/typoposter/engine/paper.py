"""Paper sizing — fixed-width print medium whose height grows with the text."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Protocol

MM_PER_INCH = 25.4


def compute_height_mm(text: str, min_mm: float = 150.0, mm_per_char: float = 1.45) -> float:
    """Poster height: the minimum plus a per-character growth term, never below the minimum."""
    desired = min_mm + round(len(text or "") * mm_per_char)
    return max(min_mm, desired)


def mm_to_px(mm: float, px_per_inch: float = 96.0) -> float:
    return mm * px_per_inch / MM_PER_INCH


@dataclass(frozen=True)
class CanvasSize:
    width_px: int
    height_px: int


class LayoutHost(Protocol):
    async def set_canvas_height(self, mm: float) -> CanvasSize:
        """Resize the print surface and report its pixel size once layout settles."""
        ...


class PaperLayoutHost:
    """Computes the pixel size of a fixed-width paper at a given resolution."""

    def __init__(self, width_mm: float = 80.0, px_per_inch: float = 96.0) -> None:
        self.width_mm = width_mm
        self.px_per_inch = px_per_inch
        self.height_mm: float | None = None

    async def set_canvas_height(self, mm: float) -> CanvasSize:
        self.height_mm = mm
        # Yield once, the way a real layout pass settles before it can be measured
        await asyncio.sleep(0)
        return CanvasSize(
            width_px=round(mm_to_px(self.width_mm, self.px_per_inch)),
            height_px=round(mm_to_px(mm, self.px_per_inch)),
        )
