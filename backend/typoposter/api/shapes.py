"""GET /api/shapes — names of the loaded shape templates."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from typoposter.dependencies import get_shape_catalog
from typoposter.engine.scene import ShapeTemplate
from typoposter.models.responses import ShapeCatalogResponse

router = APIRouter()


@router.get("/shapes", response_model=ShapeCatalogResponse)
async def list_shapes(
    catalog: tuple[ShapeTemplate, ...] = Depends(get_shape_catalog),
) -> ShapeCatalogResponse:
    return ShapeCatalogResponse(names=[t.name for t in catalog])
