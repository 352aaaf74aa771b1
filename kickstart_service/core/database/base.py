"""Base database model classes with composable mixins.

This module provides the foundation for SQLAlchemy models with:
- Consistent constraint and index naming for migrations
- Integer primary keys
- Creation timestamp tracking

Example:
    class User(Base, IntegerPKMixin, CreatedAtMixin):
        __tablename__ = "users"
        name: Mapped[str] = mapped_column(String(100))
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, MetaData
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func

# Predictable names for migrations and schema management
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base sharing one metadata registry with a naming convention."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# Range of the INTEGER primary key column. Ids outside it can never match a row.
MIN_INTEGER_ID = -(2**31)
MAX_INTEGER_ID = 2**31 - 1


class IntegerPKMixin:
    """Integer auto-increment primary key.

    Provides:
        id: Auto-incrementing integer primary key, used as the keyset tie-breaker
    """

    __allow_unmapped__ = True

    id: Mapped[int] = mapped_column(
        primary_key=True,
        autoincrement=True,
        comment="Auto-incrementing integer primary key",
    )


class CreatedAtMixin:
    """Creation timestamp, set once and never updated.

    Uses both a Python-side default (so the ORM knows the value after flush,
    including on SQLite in tests) and a server default for direct SQL inserts.

    Provides:
        created_at: Timezone-aware timestamp of record creation
    """

    __allow_unmapped__ = True

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
        nullable=False,
        comment="Timestamp of record creation",
    )


__all__ = [
    "MAX_INTEGER_ID",
    "MIN_INTEGER_ID",
    "NAMING_CONVENTION",
    "Base",
    "CreatedAtMixin",
    "IntegerPKMixin",
]
