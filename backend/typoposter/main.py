"""FastAPI app factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from typoposter.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.typoposter_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the shape catalog and font metrics before the first poster request."""
    from typoposter.dependencies import get_shape_catalog, get_text_metrics

    shapes = get_shape_catalog()
    get_text_metrics()
    if not shapes:
        logger.warning("No shape templates loaded; posters will be type only")
    logger.info(
        "Paper %.0fmm wide at %.0fppi, %d shapes, %d recipes",
        settings.paper_width_mm,
        settings.px_per_inch,
        len(shapes),
        app.state.recipe_count,
    )
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="TypoPoster",
        description="Generative typographic posters for a fixed-width print medium",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Recipe modules register themselves on import
    from typoposter.engine.registry import register_builtin_recipes

    app.state.recipe_count = register_builtin_recipes().count

    from typoposter.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
