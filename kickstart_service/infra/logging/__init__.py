"""Logging infrastructure.

Structured logging on top of the standard library:
- JSONL format for log aggregation, with OpenTelemetry trace correlation
- Automatic context injection (request_id) via contextvars
- QueueHandler + QueueListener for non-blocking I/O
- Lazy evaluation for debug messages

Basic usage:
    import logging
    from kickstart_service.infra.logging import set_log_context

    logger = logging.getLogger(__name__)

    set_log_context(request_id="abc-123")
    logger.info("Processing request")  # Automatically includes request_id

    from kickstart_service.infra.logging import get_lazy_logger

    lazy_logger = get_lazy_logger(__name__)
    lazy_logger.debug(lambda: f"Rows: {len(rows)}")  # Only runs if DEBUG enabled
"""

from kickstart_service.infra.logging.config import (
    configure_logging,
    setup_logging,
    shutdown,
)
from kickstart_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from kickstart_service.infra.logging.formatters import JSONFormatter
from kickstart_service.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "LazyLoggerAdapter",
    "clear_log_context",
    "configure_logging",
    "get_lazy_logger",
    "get_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
