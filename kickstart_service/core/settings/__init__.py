"""Application settings, one pydantic-settings class per concern.

Prefixes:
    APP_         AppSettings
    DB_          PostgresSettings (DSN read from DATABASE_URL)
    LOG_         LoggingSettings
    PAGINATION_  PaginationSettings
"""

from .app import AppSettings
from .loader import (
    clear_all_caches,
    get_app_settings,
    get_db_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings
from .postgres import PostgresSettings

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "PaginationSettings",
    "PostgresSettings",
    "clear_all_caches",
    "get_app_settings",
    "get_db_settings",
    "get_logging_settings",
    "get_pagination_settings",
]
