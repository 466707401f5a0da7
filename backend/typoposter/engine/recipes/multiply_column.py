"""Multiply Column — the first word repeated down the whole canvas, optional rotated sidebar."""

from __future__ import annotations

from typoposter.engine.context import CompositionContext
from typoposter.engine.placement import FILLED
from typoposter.engine.registry import recipe

# Roughly one row per 40px of canvas height, never fewer than this
_MIN_ROWS = 6
_ROW_PITCH = 40


@recipe(
    name="multiply_column",
    weight=1,
    description="Dense column of one repeated word with a rotated side phrase",
)
def multiply_column(ctx: CompositionContext) -> None:
    rng = ctx.rng
    w, h, pad = ctx.width, ctx.height, ctx.padding
    main = ctx.words[0]
    rows = max(_MIN_ROWS, int(h // _ROW_PITCH))
    size_main = round(h * rng.uniform_range(0.06, 0.14))
    y = round(h * 0.06)

    for i in range(rows):
        x = pad + round(rng.uniform_range(0, 4))
        rot = rng.pick([0, 0, 90, 270, 0])
        content = main.upper() if i % 2 == 0 else main.lower()
        run = ctx.add_text(x, y, content, size_main, "start", 800, rotation=rot)
        ctx.fit(run, w - pad * 2, True)
        if ctx.chance(0.7):
            ctx.distort(run)
        if ctx.chance(0.6):
            ctx.duplicate(run, rng.uniform_int(1, 4), round(size_main * 0.04 + 3))
        y += round(size_main * rng.uniform_range(0.7, 1.35))

    if len(ctx.words) > 1 and ctx.chance(0.3):
        side = " ".join(ctx.words[1:])
        size_side = round(h * rng.uniform_range(0.12, 0.22))
        x = round(w - pad / 2)
        y_mid = round(h * 0.5)
        run = ctx.add_text(x, y_mid, side, size_side, "middle", 900, rotation=90)
        ctx.fit(run, h * 0.9, True)

    for _ in range(rng.uniform_int(2, 6)):
        if not ctx.has_shapes:
            break
        scale = rng.uniform_range(0.06, 0.3)
        cx = round(rng.uniform_range(pad, w - pad))
        cy = round(rng.uniform_range(pad, h - pad))
        ctx.add_shape((cx, cy), scale, rng.pick([0, 0, 90, 270]), FILLED)
