"""Application lifespan management.

Startup Order:
1. Logging
2. Database - only when configured

Shutdown Order: Reverse of startup
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from kickstart_service.core.settings import (
    get_app_settings,
    get_db_settings,
    get_logging_settings,
)
from kickstart_service.infra.database import close_database, init_database
from kickstart_service.infra.logging import setup_logging
from kickstart_service.infra.logging import shutdown as shutdown_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start and stop application services.

    Raises:
        SQLAlchemyError: If the database is configured but unreachable;
            the application refuses to start.
    """
    app_settings = get_app_settings()
    db_settings = get_db_settings()

    setup_logging(log_settings=get_logging_settings(), force=True)
    logger.info(
        "Application starting",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
        },
    )

    if db_settings.is_configured:
        await init_database(create_tables=db_settings.create_tables)
    else:
        logger.warning("Database not configured, skipping initialization")

    try:
        yield
    finally:
        logger.info("Application shutting down", extra={"service": app_settings.service_name})
        if db_settings.is_configured:
            await close_database()
        shutdown_logging()
