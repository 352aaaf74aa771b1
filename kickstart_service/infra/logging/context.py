"""Context management for structured logging.

Provides automatic context injection into log records using contextvars,
so a request ID set once in middleware shows up on every log line emitted
while handling that request, without passing it around explicitly.

Each async task gets its own copy of the context, so concurrent requests
never see each other's values.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Add fields to the logging context for the current task.

    Example:
        ```python
        set_log_context(request_id="abc-123")
        logger.info("Processing request")  # Includes request_id
        ```
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """Get a copy of the current logging context."""
    return _log_context.get().copy()


def clear_log_context() -> None:
    """Clear all logging context for the current task."""
    _log_context.set({})


class ContextInjectingFilter(logging.Filter):
    """Logging filter that copies the log context onto each LogRecord.

    Attached to the queue handler by ``configure_logging`` so every logger
    benefits, and JSONFormatter emits the fields as top-level keys.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            # Don't overwrite existing attributes
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


__all__ = [
    "ContextInjectingFilter",
    "clear_log_context",
    "get_log_context",
    "set_log_context",
]
