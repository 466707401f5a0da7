"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from typoposter.dependencies import get_shape_catalog
from typoposter.engine.registry import get_registry
from typoposter.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        recipes_registered=get_registry().count,
        shapes_loaded=len(get_shape_catalog()),
    )


@router.get("/recipes")
async def recipes() -> dict[str, str]:
    return {spec.name: spec.description for spec in get_registry().all()}
