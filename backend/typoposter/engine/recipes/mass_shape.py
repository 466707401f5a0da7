"""Massive Shape Background — one big shape as backbone, centered headline repeated for texture."""

from __future__ import annotations

from typoposter.engine.context import CompositionContext
from typoposter.engine.placement import FILLED
from typoposter.engine.registry import recipe


@recipe(
    name="mass_shape",
    weight=2,
    description="Large background shape with a centered, echoed headline",
)
def mass_shape(ctx: CompositionContext) -> None:
    rng = ctx.rng
    w, h, pad = ctx.width, ctx.height, ctx.padding

    if ctx.has_shapes:
        scale = rng.uniform_range(1.0, 1.8)
        cx = round(w * rng.uniform_range(0.35, 0.65))
        cy = round(h * rng.uniform_range(0.3, 0.55))
        ctx.add_shape((cx, cy), scale, rng.pick([0, 90, 270]), FILLED, behind=True)

    headline = " ".join(ctx.words[:2])
    size = round(h * rng.uniform_range(0.18, 0.32))
    cx_text = round(w / 2)
    cy_text = round(h * rng.uniform_range(0.38, 0.5))
    main = ctx.add_text(cx_text, cy_text, headline, size, "middle", 900)
    # Vertical distortion reads better here than horizontal condensing
    ctx.fit(main, w - pad * 2, False)
    if ctx.chance(0.4):
        ctx.distort(main)

    for i in range(rng.uniform_int(1, 4)):
        cy_text += round(size * rng.uniform_range(0.24, 0.5))
        dup_size = round(size * rng.uniform_range(0.2, 0.34))
        dup = ctx.add_text(cx_text + round(size * 0.02 * i), cy_text, headline, dup_size, "middle", 700)
        if ctx.chance(0.3):
            ctx.duplicate(dup, rng.uniform_int(1, 3), 5)

    for _ in range(rng.uniform_int(1, 4)):
        if not ctx.has_shapes:
            break
        scale = rng.uniform_range(0.08, 0.6)
        px = round(w - pad - rng.uniform_range(10, 40))
        py = round(h * rng.uniform_range(0.12, 0.88))
        ctx.add_shape((px, py), scale, rng.pick([0, 0, 90]), FILLED)
