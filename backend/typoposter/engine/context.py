"""CompositionContext — the state a recipe works with.

Recipes receive one context: the scene to populate, the input words, the shape
catalog, canvas size, the random source and tuning config. Helper methods wrap
placement and fitting so recipes read as layout decisions.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from typoposter.engine.config import ComposerConfig
from typoposter.engine.distortion import Distortion, apply_distortion, fit_to_width
from typoposter.engine.placement import (
    FILLED,
    add_text_run,
    duplicate_with_alternation,
    insert_behind,
    place_shape,
    rotated_about_anchor,
)
from typoposter.engine.rng import RandomSource
from typoposter.engine.scene import Primitive, Scene, ShapeInstance, ShapeTemplate, TextRun


@dataclass
class CompositionContext:
    scene: Scene
    words: list[str]
    shapes: Sequence[ShapeTemplate]
    width: float
    height: float
    rng: RandomSource = field(default_factory=RandomSource)
    config: ComposerConfig = field(default_factory=ComposerConfig)

    @property
    def padding(self) -> float:
        return self.config.padding

    @property
    def has_shapes(self) -> bool:
        return len(self.shapes) > 0

    def add_text(
        self,
        x: float,
        y: float,
        content: str,
        size: float,
        anchor: str = "start",
        weight: int = 900,
        rotation: float = 0.0,
    ) -> TextRun:
        """Add a text run, rotated around its anchor when ``rotation`` is set."""
        return add_text_run(
            self.scene,
            x,
            y,
            content,
            size,
            anchor=anchor,
            weight=weight,
            extra_transform=rotated_about_anchor(rotation, x, y),
            font_family=self.config.font_family,
        )

    def add_shape(
        self,
        center: tuple[float, float],
        scale: float,
        rotation: float,
        style_mode: str = FILLED,
        behind: bool = False,
    ) -> ShapeInstance | None:
        """Place a random catalog shape. No-op (None) with an empty catalog."""
        if not self.has_shapes:
            return None
        template = self.rng.pick(self.shapes)
        shape = place_shape(self.scene, template, center, scale, rotation, style_mode, self.config)
        if behind:
            insert_behind(self.scene, shape)
        return shape

    def fit(self, primitive: Primitive, max_width: float, allow_horizontal_scale: bool = True) -> bool:
        return fit_to_width(self.scene, primitive, max_width, allow_horizontal_scale)

    def distort(self, primitive: Primitive) -> Distortion | None:
        return apply_distortion(self.scene, primitive, self.rng, self.config)

    def duplicate(self, primitive: Primitive, copies: int, offset_step: float) -> list[Primitive]:
        return duplicate_with_alternation(self.scene, primitive, copies, offset_step)

    def chance(self, threshold: float) -> bool:
        """True when a fresh roll exceeds ``threshold`` (i.e. with probability 1 - threshold)."""
        return self.rng.uniform_float() > threshold
