"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from typoposter.config import settings
from typoposter.engine.composer import PosterComposer
from typoposter.engine.metrics import PillowTextMetrics
from typoposter.engine.paper import PaperLayoutHost
from typoposter.engine.scene import ShapeTemplate
from typoposter.svg.catalog import load_shape_catalog


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_shape_catalog() -> tuple[ShapeTemplate, ...]:
    """Loaded once per process and shared read-only."""
    return tuple(load_shape_catalog(settings.shape_catalog_path or None))


@lru_cache(maxsize=1)
def get_text_metrics() -> PillowTextMetrics:
    return PillowTextMetrics(settings.font_path, settings.bold_font_path)


def get_composer() -> PosterComposer:
    return PosterComposer(metrics=get_text_metrics(), shapes=get_shape_catalog())


def get_layout_host() -> PaperLayoutHost:
    return PaperLayoutHost(width_mm=settings.paper_width_mm, px_per_inch=settings.px_per_inch)
