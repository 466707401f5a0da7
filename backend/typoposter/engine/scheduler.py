"""Debounced poster regeneration.

Each request resizes the paper, then schedules a composition after a short
delay. A newer request discards any scheduled composition that has not started
yet; compositions that have started always run to completion. At most one
composition is active at a time and older work is never queued.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Callable

from typoposter.engine.composer import PosterComposer
from typoposter.engine.paper import CanvasSize, LayoutHost, compute_height_mm
from typoposter.engine.scene import Scene

logger = logging.getLogger(__name__)

SceneCallback = Callable[[Scene], Awaitable[None]]


class PosterScheduler:
    def __init__(
        self,
        composer: PosterComposer,
        layout_host: LayoutHost,
        debounce_ms: float = 50,
        min_height_mm: float = 150.0,
        mm_per_char: float = 1.45,
        on_scene: SceneCallback | None = None,
    ) -> None:
        self.composer = composer
        self.layout_host = layout_host
        self.debounce_ms = debounce_ms
        self.min_height_mm = min_height_mm
        self.mm_per_char = mm_per_char
        self.on_scene = on_scene
        self.live_scene: Scene | None = None
        self._pending: asyncio.Task | None = None
        self._active: asyncio.Task | None = None
        # Held across compose and delivery; waiters suspend on it
        self._lock = asyncio.Lock()

    async def request(self, text: str) -> None:
        """Ask for a new poster. Returns once the generation is scheduled."""
        mm = compute_height_mm(text, self.min_height_mm, self.mm_per_char)
        size = await self.layout_host.set_canvas_height(mm)

        if self._pending is not None and not self._pending.done() and not self._started(self._pending):
            self._pending.cancel()
            logger.debug("Discarded pending generation")
        self._pending = asyncio.create_task(self._run_later(text, size))

    async def _run_later(self, text: str, size: CanvasSize) -> None:
        await asyncio.sleep(self.debounce_ms / 1000)
        # Another composition may still be delivering its result
        async with self._lock:
            self._active = asyncio.current_task()
            try:
                scene = self.composer.compose(text, size.width_px, size.height_px)
                self.live_scene = scene
                if self.on_scene is not None:
                    await self.on_scene(scene)
            finally:
                self._active = None

    def _started(self, task: asyncio.Task) -> bool:
        """True once ``task`` holds the lock, i.e. its composition has begun."""
        return self._lock.locked() and task is self._active

    async def wait(self) -> Scene | None:
        """Wait for the scheduled generation, if any, and return the live scene."""
        task = self._pending
        if task is not None:
            await asyncio.wait([task])
            if not task.cancelled():
                task.result()
        return self.live_scene

    def cancel(self) -> None:
        """Drop any scheduled or running work, e.g. when the client goes away."""
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
