"""Main entry point for kickstart-service.

Runs the FastAPI application under uvicorn with host, port and reload taken
from ``AppSettings``.
"""

from __future__ import annotations


def main() -> None:
    """Run the FastAPI application server."""
    import uvicorn

    from kickstart_service.core.settings import get_app_settings, get_logging_settings

    settings = get_app_settings()
    log_settings = get_logging_settings()

    uvicorn.run(
        "kickstart_service.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        access_log=settings.debug,
        log_level=log_settings.level.lower(),
    )


if __name__ == "__main__":
    main()
