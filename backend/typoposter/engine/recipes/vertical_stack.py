"""Vertical Power Stack — large stacked words, shape behind, rhythmic small repeats.

Up to four words descend down the left edge, each line a little smaller than
the previous one. A large shape sits behind the block and the first word is
repeated in small type near the bottom.
"""

from __future__ import annotations

from typoposter.engine.context import CompositionContext
from typoposter.engine.placement import FILLED, OUTLINED
from typoposter.engine.registry import recipe

_MAX_LINES = 4


@recipe(
    name="vertical_stack",
    weight=2,
    description="Descending left-aligned word stack with a shape behind",
)
def vertical_stack(ctx: CompositionContext) -> None:
    rng = ctx.rng
    w, h, pad = ctx.width, ctx.height, ctx.padding
    head_max = round(h * 0.30)
    head_min = round(h * 0.12)
    lines = ctx.words[:_MAX_LINES]
    y = round(h * 0.16)

    for i, word in enumerate(lines):
        size = round(rng.uniform_range(head_max * (1 - i * 0.1), head_max * (0.9 - i * 0.05)))
        run = ctx.add_text(pad, y, word, size, "start", 900)
        ctx.fit(run, w - pad * 2, True)
        ctx.distort(run)
        if ctx.chance(0.4):
            ctx.duplicate(run, rng.uniform_int(1, 4), round(size * 0.03 + 4))
        y += round(size * rng.uniform_range(0.86, 1.05))

    if ctx.has_shapes and ctx.chance(0.2):
        scale = rng.uniform_range(0.7, 1.4)
        cx = round(w * rng.uniform_range(0.55, 0.9))
        cy = round(h * rng.uniform_range(0.2, 0.45))
        rot = rng.pick([0, 90, 270])
        ctx.add_shape((cx, cy), scale, rot, OUTLINED if scale > 0.9 else FILLED, behind=True)

    if len(ctx.words) > 1 and ctx.chance(0.3):
        rep = ctx.words[0]
        size_small = round(max(8, head_min * 0.20))
        yy = round(h * 0.7)
        for i in range(rng.uniform_int(3, 8)):
            x = pad + rng.uniform_int(0, 6)
            run = ctx.add_text(x, yy + i * round(size_small * 1.2), rep, size_small, "start", 700, rotation=rng.pick([0, 90]))
            if ctx.chance(0.5):
                ctx.duplicate(run, rng.uniform_int(1, 3), 4)
