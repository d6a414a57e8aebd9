"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from veloraswap import __version__
from veloraswap.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    yield
    # Shutdown
    from veloraswap.web.controllers import swaps

    await swaps._swap_service.close()
    logger.info("Aggregator client closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Veloraswap API",
        description="Builds unsigned DEX swap transactions for client-side signing",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
        # No interactive docs in production
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    from veloraswap.api.routes import health
    from veloraswap.web.controllers import swaps_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(swaps_router, prefix="/api/v1")

    return app
