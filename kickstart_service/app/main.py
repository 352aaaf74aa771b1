"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from kickstart_service.app.exception_handlers import configure_exception_handlers
from kickstart_service.app.lifespan import lifespan
from kickstart_service.app.middleware import configure_middleware
from kickstart_service.app.router import setup_routers
from kickstart_service.core.settings import get_app_settings


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Settings are loaded once and cached via LRU cache.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = get_app_settings()

    app = FastAPI(
        **app_settings.get_fastapi_kwargs(),
        lifespan=lifespan,
    )

    # Configure exception handlers (must be before middleware)
    configure_exception_handlers(app)

    configure_middleware(app)

    setup_routers(app, app_settings)

    return app


# Application instance for uvicorn
app = create_app()
