"""Grid Rhythm — strong left headline, right-hand grid of small shapes and words."""

from __future__ import annotations

from typoposter.engine.context import CompositionContext
from typoposter.engine.placement import FILLED, OUTLINED
from typoposter.engine.registry import recipe

_HEADLINE_BAND = 0.55
_COLUMNS = 2
_JITTER = 6


@recipe(
    name="grid_rhythm",
    weight=1,
    description="Left headline band with a jittered two-column grid",
)
def grid_rhythm(ctx: CompositionContext) -> None:
    rng = ctx.rng
    w, h, pad = ctx.width, ctx.height, ctx.padding

    phrase = " ".join(ctx.words[:3])
    size = round(h * rng.uniform_range(0.16, 0.26))
    y = round(h * rng.uniform_range(0.28, 0.42))
    main = ctx.add_text(pad, y, phrase, size, "start", 900)
    ctx.fit(main, round(w * _HEADLINE_BAND) - pad, True)
    if ctx.chance(0.4):
        ctx.distort(main)

    rows = rng.uniform_int(3, 7)
    gap = round((w - w * _HEADLINE_BAND - pad * 2) / _COLUMNS)
    start_x = round(w * _HEADLINE_BAND)
    top = round(h * 0.12)
    row_step = round(size * 0.5)

    for r in range(rows):
        for c in range(_COLUMNS):
            px = start_x + c * gap + rng.uniform_int(-_JITTER, _JITTER)
            py = top + r * row_step + rng.uniform_int(-_JITTER, _JITTER)
            if ctx.chance(0.5) and ctx.has_shapes:
                scale = rng.uniform_range(0.06, 0.36)
                ctx.add_shape((px, py), scale, rng.pick([0, 0, 90]), OUTLINED if scale > 0.5 else FILLED)
            else:
                word = ctx.words[rng.uniform_int(0, len(ctx.words) - 1)]
                run = ctx.add_text(px, py, word, round(size * 0.18), "start", 700, rotation=rng.pick([0, 90]))
                if ctx.chance(0.5):
                    ctx.duplicate(run, rng.uniform_int(1, 3), 3)
