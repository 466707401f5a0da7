"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from typoposter.engine.rng import RandomSource
from typoposter.engine.scene import BoundingBox, Canvas, Scene, TextRun
from typoposter.svg.catalog import parse_shape_catalog


class StubMetrics:
    """Deterministic text metrics: fixed advance per character, box of one em."""

    def __init__(self, char_width: float = 0.6, ascent: float = 0.8, descent: float = 0.2) -> None:
        self.char_width = char_width
        self.ascent = ascent
        self.descent = descent
        self.calls = 0

    def measure(self, run: TextRun) -> BoundingBox | None:
        self.calls += 1
        width = len(run.content) * run.font_size * self.char_width
        x = run.x - width / 2 if run.text_anchor == "middle" else run.x
        return BoundingBox(x, run.y - run.font_size * self.ascent, width, run.font_size * (self.ascent + self.descent))


class UnavailableMetrics:
    """Metrics provider that can never measure anything."""

    def measure(self, run: TextRun) -> BoundingBox | None:
        return None


class ScriptedRandom(RandomSource):
    """Replays fixed rolls, then falls back to a constant."""

    def __init__(self, rolls: Iterable[float] = (), fallback: float = 0.5) -> None:
        super().__init__()
        self._rolls = list(rolls)
        self.fallback = fallback
        self.draws = 0

    def uniform_float(self) -> float:
        self.draws += 1
        if self._rolls:
            return self._rolls.pop(0)
        return self.fallback


# Square and bar templates drawn around the origin
CATALOG_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="-100 -100 200 200">
  <defs>
    <g id="square">
      <rect x="-50" y="-50" width="100" height="100" fill="red"/>
    </g>
    <g id="bar">
      <rect x="-50" y="-10" width="100" height="20"/>
    </g>
    <g id="dots">
      <circle cx="-20" cy="0" r="10"/>
      <circle cx="20" cy="0" r="10" stroke="blue"/>
    </g>
  </defs>
</svg>'''

SINGLE_SHAPE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <defs>
    <g id="disc"><circle cx="0" cy="0" r="60"/></g>
  </defs>
</svg>'''


@pytest.fixture
def metrics() -> StubMetrics:
    return StubMetrics()


@pytest.fixture
def scene(metrics: StubMetrics) -> Scene:
    return Scene(canvas=Canvas(width=300, height=600), metrics=metrics)


@pytest.fixture
def catalog():
    return parse_shape_catalog(CATALOG_SVG)


@pytest.fixture
def shapes_by_name(catalog):
    return {t.name: t for t in catalog}


@pytest.fixture
def single_shape_catalog():
    return parse_shape_catalog(SINGLE_SHAPE_SVG)
