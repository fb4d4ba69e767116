"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from modules.auth.routes import router as auth_router
from modules.profiles.routes import router as profiles_router

from .dependencies import ServiceContainer
from .errors import register_error_handlers
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings: Settings = app.state.settings
    logger.info(
        "Starting %s %s on %s:%s (%s)",
        settings.app_name, settings.app_version,
        settings.host, settings.port, settings.environment,
    )
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app from; loaded from the
                  environment when omitted
        container: Pre-wired services; built from `settings` when omitted

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="User signup, login and profile management API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.container = container or ServiceContainer(settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(profiles_router, prefix="/api/users", tags=["users"])

    return app


# Application instance for uvicorn
app = create_app()
