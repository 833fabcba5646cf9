import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from designkit.api.deps import get_catalog, get_settings
from designkit.catalog import CatalogLoadError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load the catalog on startup (fail-fast)
    try:
        catalog = get_catalog(settings)
    except CatalogLoadError as e:
        logger.critical("Catalog load failed: %s", e)
        raise
    logger.info(
        "Catalog %s loaded (%d categories); state mirror at %s",
        catalog.version,
        len(catalog.categories()),
        settings.state_file,
    )

    yield


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="DesignKit API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # --- Routers ---
    from designkit.api.routes import designkit

    app.include_router(designkit.router, prefix="/api/designkit", tags=["DesignKit"])

    # CORS (Allow the browser UI)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "designkit"}

    return app


app = create_app()
