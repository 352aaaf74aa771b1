"""Database models package.

Import all models here to make them available to Alembic for auto-generation.
"""

from __future__ import annotations

from .user import User

__all__ = ["User"]
