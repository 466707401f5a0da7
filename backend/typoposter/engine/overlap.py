"""Overlap resolution — reconcile collisions between text runs and shapes.

Every text/shape pair whose measured boxes overlap with positive area gets one
roll and exactly one of three treatments: a white mask over the overlap, the
text turned white, or the shape erased to white. Boxes are measured once
before any treatment, and pairs are handled independently, so a shape can be
touched by several texts (last write wins).
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TypeVar

from typoposter.engine.config import ComposerConfig
from typoposter.engine.rng import RandomSource
from typoposter.engine.scene import WHITE, BoundingBox, RectPrimitive, Scene, ShapeInstance, TextRun

logger = logging.getLogger(__name__)


class Resolution(str, enum.Enum):
    MASK = "mask"
    INVERT_TEXT = "invert_text"
    ERASE_SHAPE = "erase_shape"


@dataclass(frozen=True)
class OverlapResolution:
    text: TextRun
    shape: ShapeInstance
    region: BoundingBox
    action: Resolution


P = TypeVar("P", TextRun, ShapeInstance)


def _measured(scene: Scene, primitives: list[P]) -> list[tuple[P, BoundingBox]]:
    out: list[tuple[P, BoundingBox]] = []
    for p in primitives:
        box = scene.measure(p)
        if box is not None:
            out.append((p, box))
    return out


def resolve_overlaps(
    scene: Scene,
    rng: RandomSource,
    config: ComposerConfig | None = None,
) -> list[OverlapResolution]:
    config = config or ComposerConfig()
    texts = _measured(scene, scene.text_runs)
    shapes = _measured(scene, scene.shapes)

    resolutions: list[OverlapResolution] = []
    for text, text_box in texts:
        for shape, shape_box in shapes:
            region = text_box.intersection(shape_box)
            if region is None:
                continue

            roll = rng.uniform_float()
            if roll > config.mask_threshold:
                scene.append(RectPrimitive(region.x, region.y, region.width, region.height, WHITE, role="mask"))
                action = Resolution.MASK
            elif roll > config.invert_threshold:
                text.set_fill(WHITE)
                action = Resolution.INVERT_TEXT
            else:
                shape.recolor(fill=WHITE, stroke=WHITE)
                action = Resolution.ERASE_SHAPE

            resolutions.append(OverlapResolution(text, shape, region, action))

    scene.overlap_pass_ran = True
    scene.resolutions = resolutions
    logger.debug(
        "Overlap pass: %d texts x %d shapes, %d resolved",
        len(texts),
        len(shapes),
        len(resolutions),
    )
    return resolutions
