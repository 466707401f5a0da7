"""POST /api/poster — compose a poster; WS /api/poster/live — debounced live preview."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from fastapi.responses import Response

from typoposter.config import Settings
from typoposter.dependencies import get_composer, get_layout_host, get_settings
from typoposter.engine.composer import PosterComposer
from typoposter.engine.paper import PaperLayoutHost, compute_height_mm
from typoposter.engine.scene import Scene
from typoposter.engine.scheduler import PosterScheduler
from typoposter.models.requests import PosterRequest
from typoposter.models.responses import LivePosterMessage, PosterResponse
from typoposter.svg.serializer import serialize_scene

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/poster")


async def _compose(
    req: PosterRequest,
    composer: PosterComposer,
    layout_host: PaperLayoutHost,
    cfg: Settings,
) -> tuple[Scene, float]:
    height_mm = compute_height_mm(req.text, cfg.min_height_mm, cfg.mm_per_char)
    size = await layout_host.set_canvas_height(height_mm)
    return composer.compose(req.text, size.width_px, size.height_px), height_mm


@router.post("", response_model=PosterResponse)
async def create_poster(
    req: PosterRequest,
    composer: PosterComposer = Depends(get_composer),
    layout_host: PaperLayoutHost = Depends(get_layout_host),
    cfg: Settings = Depends(get_settings),
) -> PosterResponse:
    start = time.perf_counter()
    scene, height_mm = await _compose(req, composer, layout_host, cfg)
    svg = serialize_scene(scene, title=req.title)
    elapsed = (time.perf_counter() - start) * 1000

    return PosterResponse(
        svg=svg,
        width=round(scene.canvas.width),
        height=round(scene.canvas.height),
        height_mm=height_mm,
        recipe=scene.recipe,
        primitive_count=len(scene),
        overlaps_resolved=len(scene.resolutions),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/png")
async def create_poster_png(
    req: PosterRequest,
    composer: PosterComposer = Depends(get_composer),
    layout_host: PaperLayoutHost = Depends(get_layout_host),
    cfg: Settings = Depends(get_settings),
) -> Response:
    from typoposter.utils.rasterizer import svg_to_png

    scene, _ = await _compose(req, composer, layout_host, cfg)
    png = svg_to_png(serialize_scene(scene, title=req.title))
    return Response(content=png, media_type="image/png")


@router.websocket("/live")
async def live_poster(
    websocket: WebSocket,
    composer: PosterComposer = Depends(get_composer),
    layout_host: PaperLayoutHost = Depends(get_layout_host),
    cfg: Settings = Depends(get_settings),
) -> None:
    """Every text message is a regeneration request; composed posters are pushed back."""
    await websocket.accept()

    async def _send(scene: Scene) -> None:
        message = LivePosterMessage(
            svg=serialize_scene(scene),
            recipe=scene.recipe,
            width=scene.canvas.width,
            height=scene.canvas.height,
        )
        await websocket.send_json(message.model_dump())

    scheduler = PosterScheduler(
        composer,
        layout_host,
        debounce_ms=cfg.debounce_ms,
        min_height_mm=cfg.min_height_mm,
        mm_per_char=cfg.mm_per_char,
        on_scene=_send,
    )

    try:
        while True:
            text = await websocket.receive_text()
            await scheduler.request(text[: cfg.max_text_length])
    except WebSocketDisconnect:
        logger.debug("Live preview client disconnected")
    finally:
        scheduler.cancel()
