"""Poster composer — builds one scene: background, recipe, overlap pass, footer."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from typoposter.engine.config import ComposerConfig
from typoposter.engine.context import CompositionContext
from typoposter.engine.metrics import TextMetrics
from typoposter.engine.overlap import resolve_overlaps
from typoposter.engine.placement import add_text_run
from typoposter.engine.registry import RecipeRegistry, register_builtin_recipes
from typoposter.engine.rng import RandomSource
from typoposter.engine.scene import Canvas, Scene, ShapeTemplate

logger = logging.getLogger(__name__)


def split_words(text: str) -> list[str]:
    return (text or "").split()


class PosterComposer:
    """Orchestrates one composition per ``compose`` call.

    Collaborators are injected: text metrics, the shape catalog, the random
    source and the recipe registry. Nothing is shared between compositions
    except the read-only catalog.
    """

    def __init__(
        self,
        metrics: TextMetrics,
        shapes: Sequence[ShapeTemplate] = (),
        rng: RandomSource | None = None,
        config: ComposerConfig | None = None,
        registry: RecipeRegistry | None = None,
    ) -> None:
        self.metrics = metrics
        self.shapes = list(shapes)
        self.rng = rng or RandomSource()
        self.config = config or ComposerConfig()
        self.registry = registry or register_builtin_recipes()

    def compose(self, text: str, width: float, height: float) -> Scene:
        """Compose a poster for ``text`` on a ``width`` x ``height`` px canvas."""
        start = time.perf_counter()
        cfg = self.config
        scene = Scene(canvas=Canvas(width=width, height=height), metrics=self.metrics)

        words = split_words(text)
        if not words:
            add_text_run(
                scene,
                cfg.padding,
                round(height * 0.45),
                cfg.placeholder_text,
                cfg.placeholder_size,
                "start",
                cfg.placeholder_weight,
                font_family=cfg.font_family,
            )
            logger.info("Empty input: placeholder scene")
            return scene

        spec = self.registry.get(self.pick_recipe())
        scene.recipe = spec.name
        ctx = CompositionContext(
            scene=scene,
            words=words,
            shapes=self.shapes,
            width=width,
            height=height,
            rng=self.rng,
            config=cfg,
        )
        spec.fn(ctx)
        resolutions = resolve_overlaps(scene, self.rng, cfg)

        add_text_run(
            scene,
            cfg.padding,
            round(height - cfg.footer_bottom_offset),
            " ".join(words[: cfg.footer_word_count]),
            cfg.footer_size,
            "start",
            cfg.footer_weight,
            font_family=cfg.font_family,
        )

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Composed %r with %s: %d primitives, %d overlaps resolved in %.1fms",
            text,
            spec.name,
            len(scene),
            len(resolutions),
            elapsed,
        )
        return scene

    def pick_recipe(self) -> str:
        pool = self.registry.selection_pool(self.config.recipe_weights)
        if not pool:
            raise ValueError("No layout recipes registered")
        return self.rng.pick(pool)
