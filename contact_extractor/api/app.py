"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contact_extractor import __version__
from contact_extractor.api.routes import router as extraction_router
from contact_extractor.config import get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    config = get_config()
    logger.info(
        f"Starting Contact Extractor API (upload limit {config.max_file_size_mb}MB)..."
    )
    yield
    logger.info("Shutting down Contact Extractor API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Contact Extractor API",
        description=(
            "Extracts phone numbers from uploaded PDF and Word documents. "
            "Numbers are normalized to 10-digit mobile form, deduplicated, "
            "and can be downloaded as a freshly generated PDF."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    application.include_router(extraction_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "contact-extractor"}

    return application


app = create_app()
