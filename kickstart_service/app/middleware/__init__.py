"""Middleware configuration for FastAPI application.

Example Usage:
    from kickstart_service.app.middleware import configure_middleware

    configure_middleware(app)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kickstart_service.app.middleware.base import HeaderContextMiddleware
from kickstart_service.app.middleware.request_id import RequestIDMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

__all__ = ["HeaderContextMiddleware", "RequestIDMiddleware", "configure_middleware"]


def configure_middleware(app: FastAPI) -> None:
    """Install the middleware stack on ``app``."""
    app.add_middleware(RequestIDMiddleware)
    logger.info("Middleware configured", extra={"middleware": ["RequestIDMiddleware"]})
