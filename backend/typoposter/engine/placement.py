"""Primitive placement — text runs, shape instances and layered duplicates."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from typoposter.engine.config import ComposerConfig
from typoposter.engine.scene import BLACK, WHITE, Primitive, Scene, ShapeInstance, ShapeTemplate, TextRun
from typoposter.engine.transforms import Rotate, Scale, TransformOp, Translate

logger = logging.getLogger(__name__)

FILLED = "filled"
OUTLINED = "outlined"


def _round_px(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def add_text_run(
    scene: Scene,
    x: float,
    y: float,
    content: str,
    size: float,
    anchor: str = "start",
    weight: int = 900,
    extra_transform: Sequence[TransformOp] | None = None,
    font_family: str | None = None,
) -> TextRun:
    """Create a black text run and paint it on top. No fitting happens here."""
    run = TextRun(
        content=content,
        x=x,
        y=y,
        font_size=size,
        font_weight=weight,
        text_anchor=anchor,
        fill=BLACK,
    )
    if font_family:
        run.font_family = font_family
    if extra_transform:
        run.append_transform(*extra_transform)
    scene.append(run)
    return run


def rotated_about_anchor(degrees: float, x: float, y: float) -> list[TransformOp]:
    """Rotation around a text anchor; empty for 0 degrees."""
    if degrees % 360 == 0:
        return []
    return [Rotate(degrees, x, y)]


def place_shape(
    scene: Scene,
    template: ShapeTemplate,
    center: tuple[float, float],
    scale: float,
    rotation_deg: float,
    style_mode: str = FILLED,
    config: ComposerConfig | None = None,
) -> ShapeInstance:
    """Clone a template onto the canvas: translate(center) rotate scale, recolored."""
    config = config or ComposerConfig()
    cx, cy = center
    shape = ShapeInstance(
        template=template,
        cx=cx,
        cy=cy,
        rotation=rotation_deg,
        scale=scale,
        style_mode=style_mode,
        elements=[el.copy() for el in template.elements],
    )
    shape.append_transform(Translate(cx, cy), Rotate(rotation_deg), Scale(scale))

    if style_mode == OUTLINED:
        # Stroke is drawn in template units, so divide by scale to keep it visible
        width = max(config.min_stroke_width, config.outline_stroke / scale) if scale > 0 else config.min_stroke_width
        shape.recolor(fill="none", stroke=BLACK, stroke_width=width)
    else:
        shape.recolor(fill=BLACK, stroke="none")

    scene.append(shape)
    return shape


def insert_behind(scene: Scene, primitive: Primitive) -> None:
    scene.insert_behind(primitive)


def duplicate_with_alternation(
    scene: Scene,
    base: Primitive,
    copies: int = 3,
    offset_step: float = 6,
) -> list[Primitive]:
    """Stack ``copies`` clones of ``base`` with alternating black/white fills.

    Clone i is offset by (i+1)*step in x and (i+1)*max(2, step/2) in y,
    positive for even i and negative for odd i, and painted above the
    previous clone.
    """
    if scene.measure(base) is None:
        logger.debug("Duplicate skipped: base primitive not measurable")
        return []

    clones: list[Primitive] = []
    for i in range(copies):
        clone = base.clone()
        clone.set_fill(BLACK if i % 2 == 0 else WHITE)
        sign = 1 if i % 2 == 0 else -1
        dx = sign * _round_px((i + 1) * offset_step)
        dy = sign * _round_px((i + 1) * max(2, offset_step / 2))
        clone.append_transform(Translate(dx, dy))
        scene.append(clone)
        clones.append(clone)
    return clones
