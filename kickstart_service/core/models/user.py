"""User model."""

from __future__ import annotations

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from kickstart_service.core.database import Base, CreatedAtMixin, IntegerPKMixin


class User(Base, IntegerPKMixin, CreatedAtMixin):
    """A user record.

    Listing walks users in ``(created_at, id)`` order, so the composite
    index below backs every page query.
    """

    __tablename__ = "users"
    __table_args__ = (Index("ix_users_created_at_id", "created_at", "id"),)

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Display name, stored trimmed",
    )
    age: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Age in years (1-150)",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name={self.name!r}, age={self.age})>"
