"""FastAPI application factory — entry point for Sing Me A Song."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from singmeasong import __version__
from singmeasong.api.errors import register_exception_handlers
from singmeasong.api.routes.recommendations import router as recommendations_router
from singmeasong.config import StoreBackend, settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown events."""
    logger.info("Sing Me A Song starting up...")
    logger.info("Store backend: %s", settings.store_backend.value)
    logger.info(
        "Removal threshold: %d, popularity threshold: %d (%.0f%% popular picks)",
        settings.removal_threshold,
        settings.popularity_threshold,
        settings.popular_share,
    )
    if settings.store_backend is StoreBackend.SQL:
        from singmeasong.database import create_schema, engine

        if settings.create_schema:
            await create_schema(engine)
        yield
        await engine.dispose()
    else:
        yield
    logger.info("Sing Me A Song shutting down...")


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    application = FastAPI(
        title="Sing Me A Song",
        description="Song recommendations ranked by community votes",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Middleware ──────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Errors & Routes ────────────────────────────
    register_exception_handlers(application)
    application.include_router(recommendations_router)

    # ── Health Check ───────────────────────────────
    @application.get("/health", tags=["System"])
    async def health() -> dict[str, str]:
        return {"status": "healthy", "service": "singmeasong"}

    return application


app = create_app()


def serve() -> None:
    """Console entry point: run the API with uvicorn."""
    uvicorn.run(
        "singmeasong.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
