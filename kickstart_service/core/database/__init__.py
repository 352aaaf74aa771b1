"""Core database package: declarative base, mixins, repository and errors.

Base Classes and Mixins:
    - Base: Declarative base with constraint naming convention
    - IntegerPKMixin: Auto-increment integer primary key
    - CreatedAtMixin: created_at tracking

Repository:
    - BaseRepository[T]: Generic CRUD and keyset pagination with explicit session passing

Errors:
    - StoreError: Any SQLAlchemy failure, raised via handle_store_errors()
"""

from kickstart_service.core.database.base import (
    NAMING_CONVENTION,
    Base,
    CreatedAtMixin,
    IntegerPKMixin,
)
from kickstart_service.core.database.exceptions import (
    RepositoryError,
    StoreError,
    handle_store_errors,
)
from kickstart_service.core.database.filters import StatementFilter
from kickstart_service.core.database.repository import BaseRepository

__all__ = [
    "NAMING_CONVENTION",
    "Base",
    "BaseRepository",
    "CreatedAtMixin",
    "IntegerPKMixin",
    "RepositoryError",
    "StatementFilter",
    "StoreError",
    "handle_store_errors",
]
