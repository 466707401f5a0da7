"""Fit-to-width and probabilistic distortion of placed primitives."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from typoposter.engine.config import ComposerConfig
from typoposter.engine.rng import RandomSource
from typoposter.engine.scene import Primitive, Scene
from typoposter.engine.transforms import Scale, SkewX, about, compose_matrix, ops_after_last_rotation

logger = logging.getLogger(__name__)

# Float slack when comparing a fitted width against its limit
_FIT_EPS = 1e-6

SUBTLE = "subtle"
STRONG = "strong"
EXTREME = "extreme"


@dataclass(frozen=True)
class Distortion:
    tier: str
    scale_x: float
    scale_y: float
    skew_deg: float


def fit_to_width(
    scene: Scene,
    primitive: Primitive,
    max_width: float,
    allow_horizontal_scale: bool = True,
) -> bool:
    """Condense a primitive horizontally so its baseline length fits ``max_width``.

    The scale pivots on the box origin so the left/baseline anchoring stays put.
    Returns True only when a scale op was appended.
    """
    box = scene.measure_baseline(primitive)
    if box is None:
        logger.debug("fit_to_width skipped: not measurable")
        return False
    if box.width <= max_width + _FIT_EPS or box.width <= 0:
        return False
    if not allow_horizontal_scale:
        logger.debug("fit_to_width: %.1fpx overflows %.1fpx, horizontal scaling disallowed", box.width, max_width)
        return False

    local = scene.measure_local(primitive)
    if local is None:
        return False
    # Only the x column of the baseline matrix is scaled; skew keeps its share of the width
    m = compose_matrix(ops_after_last_rotation(primitive.transform))
    a, b = abs(m[0, 0]), abs(m[0, 1])
    room = max_width - b * local.height
    if a * local.width <= 0 or room <= 0:
        logger.debug("fit_to_width: skew alone exceeds %.1fpx, not scaling", max_width)
        return False
    sx = room / (a * local.width)
    primitive.append_transform(*about((local.x, local.y), Scale(sx, 1)))
    return True


def apply_distortion(
    scene: Scene,
    primitive: Primitive,
    rng: RandomSource,
    config: ComposerConfig | None = None,
    max_scale_y: float | None = None,
    min_scale_x: float | None = None,
    max_skew_deg: float | None = None,
) -> Distortion | None:
    """Maybe stretch, condense and skew a primitive around its center.

    A share of calls (``no_distortion_probability``) deliberately do nothing.
    The rest pick a subtle, strong or extreme tier from a second roll.
    """
    config = config or ComposerConfig()
    max_scale_y = config.max_scale_y if max_scale_y is None else max_scale_y
    min_scale_x = config.min_scale_x if min_scale_x is None else min_scale_x
    max_skew_deg = config.max_skew_deg if max_skew_deg is None else max_skew_deg

    if rng.uniform_float() < config.no_distortion_probability:
        return None

    roll = rng.uniform_float()
    if roll < config.subtle_tier_cutoff:
        tier = SUBTLE
        scale_y = rng.uniform_range(*config.subtle_scale_y)
        scale_x = rng.uniform_range(*config.subtle_scale_x)
        skew = rng.uniform_range(-config.subtle_skew_deg, config.subtle_skew_deg)
    elif roll < config.strong_tier_cutoff:
        tier = STRONG
        scale_y = rng.uniform_range(config.strong_scale_y_floor, min(config.strong_scale_y_cap, max_scale_y))
        scale_x = rng.uniform_range(max(min_scale_x, config.strong_scale_x[0]), config.strong_scale_x[1])
        skew = rng.uniform_range(-config.strong_skew_deg, config.strong_skew_deg)
    else:
        tier = EXTREME
        scale_y = rng.uniform_range(config.extreme_scale_y_floor, max_scale_y)
        scale_x = rng.uniform_range(min_scale_x, config.extreme_scale_x_cap)
        skew = rng.uniform_range(-max_skew_deg, max_skew_deg)

    box = scene.measure_local(primitive)
    if box is None:
        logger.debug("apply_distortion skipped: not measurable")
        return None

    primitive.append_transform(*about(box.center, SkewX(skew), Scale(scale_x, scale_y)))
    return Distortion(tier=tier, scale_x=scale_x, scale_y=scale_y, skew_deg=skew)
