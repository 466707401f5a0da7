"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    recipes_registered: int = 0
    shapes_loaded: int = 0


class ShapeCatalogResponse(BaseModel):
    names: list[str] = Field(default_factory=list)


class PosterResponse(BaseModel):
    svg: str
    width: int
    height: int
    height_mm: float
    recipe: str | None = None
    primitive_count: int = 0
    overlaps_resolved: int = 0
    processing_time_ms: float = 0.0


class LivePosterMessage(BaseModel):
    svg: str
    recipe: str | None = None
    width: float
    height: float
