"""FastAPI application factory."""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jsdoc_parser import __version__
from jsdoc_parser.api.routes import health_router, signatures_router
from jsdoc_parser.config import get_settings
from jsdoc_parser.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    # Configure logging first
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown."""
        logger.info("application_starting", version=__version__)
        yield
        logger.info("application_stopped")

    app = FastAPI(
        title="JSDoc Parser API",
        description="Locates JavaScript functions and describes their signatures for JSDoc generation",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router)
    app.include_router(signatures_router, prefix="/api/v1")

    logger.info(
        "application_configured",
        debug=settings.debug,
        reuse_placeholder=settings.reuse_placeholder,
    )

    return app
