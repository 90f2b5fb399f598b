"""
My API - Main Application Entry Point

Demo service providing:
- Greeting and mock users endpoints
- Hand-written OpenAPI document and Swagger UI page
- Opening the docs page in the default browser on startup
"""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from app.config import get_settings
from app.api import router
from app.browser import BrowserLauncher, browser_launcher
from app.middleware import CORSMiddleware


def setup_logging():
    """Configure structured logging."""
    settings = get_settings()

    # Set log level
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure root logger
    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        stream=sys.stdout
    )

    # Reduce noise from libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    logger = structlog.get_logger()

    # Startup
    logger.info(f"Server running on port {settings.port}")
    logger.info(f"API Documentation available at: {settings.docs_url}")
    logger.info(f"Server started at: {settings.base_url}")

    if settings.open_browser:
        launcher: BrowserLauncher = app.state.browser_launcher
        app.state.browser_task = asyncio.create_task(
            launcher.open_later(settings.docs_url, settings.browser_delay)
        )

    yield

    # Shutdown
    logger.info("Server stopped")


def create_app(launcher: Optional[BrowserLauncher] = None) -> FastAPI:
    """Build the application. Built-in docs are off; /api-docs replaces them."""
    app = FastAPI(
        title="My API",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan
    )
    app.state.browser_launcher = launcher or browser_launcher

    app.add_middleware(CORSMiddleware)
    app.include_router(router)

    return app


# Setup logging
setup_logging()

# Create FastAPI app
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower()
    )
