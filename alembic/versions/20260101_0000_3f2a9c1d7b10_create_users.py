"""create users

Revision ID: 3f2a9c1d7b10
Revises:
Create Date: 2026-01-01 00:00:00.000000+00:00

"""
from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b10'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False,
                  comment='Auto-incrementing integer primary key'),
        sa.Column('name', sa.String(length=100), nullable=False,
                  comment='Display name, stored trimmed'),
        sa.Column('age', sa.Integer(), nullable=False, comment='Age in years (1-150)'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'),
                  nullable=False, comment='Timestamp of record creation'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_users')),
    )
    op.create_index('ix_users_created_at_id', 'users', ['created_at', 'id'], unique=False)


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index('ix_users_created_at_id', table_name='users')
    op.drop_table('users')
