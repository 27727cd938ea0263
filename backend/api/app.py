"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import BlinkshopError
from .dependencies import ServiceContainer
from .models.errors import ErrorResponse
from .routes import health
from modules.auth.routes import router as auth_router, pages_router as auth_pages_router
from modules.freshness.routes import router as freshness_router
from modules.shortcut.routes import router as shortcut_router
from modules.listings.routes import router as listings_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings = app.state.container.settings
    logger.info("Starting Blinkshop API on %s:%s", settings.host, settings.port)
    yield
    logger.info("Shutting down Blinkshop API")
    app.state.container.reset()


async def blinkshop_error_handler(request: Request, exc: BlinkshopError) -> JSONResponse:
    """Render module errors that no route translated."""
    if exc.status_code >= 500:
        logger.error("Unhandled %s on %s: %s", exc.code, request.url.path, exc.message)
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        container: Service container to serve requests from. Defaults to
            one built from environment settings.

    Returns:
        Configured FastAPI instance
    """
    container = container or ServiceContainer(get_settings())
    settings = container.settings

    app = FastAPI(
        title=settings.app_name,
        description="Blink.shop storefront and iOS Shortcut upload API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.container = container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(BlinkshopError, blinkshop_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(freshness_router, prefix="/api", tags=["auth"])
    app.include_router(auth_router, prefix="/api", tags=["auth"])
    app.include_router(auth_pages_router, tags=["pages"])
    app.include_router(shortcut_router, prefix="/api/shortcut-upload", tags=["shortcut"])
    app.include_router(listings_router, prefix="/api/listings", tags=["listings"])

    return app


# Application instance for uvicorn
app = create_app()
