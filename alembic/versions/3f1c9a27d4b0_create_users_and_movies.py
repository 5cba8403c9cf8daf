"""Create ``users`` and ``movies`` tables.

Revision ID: 3f1c9a27d4b0
Revises:
Create Date: 2026-10-19 20:40:00.000000

Both tables use an auto-incrementing integer primary key so that ids are
assigned by the database.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "3f1c9a27d4b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

USERS = "users"
MOVIES = "movies"
IDX_USERS_ID = op.f("ix_users_id")
IDX_USERS_EMAIL = op.f("ix_users_email")
IDX_MOVIES_ID = op.f("ix_movies_id")


def upgrade() -> None:
    """Create both tables and their indexes."""
    op.create_table(
        USERS,
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("gender", sa.String(length=50), nullable=False),
        sa.Column("role", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(IDX_USERS_ID, USERS, ["id"], unique=False)
    op.create_index(IDX_USERS_EMAIL, USERS, ["email"], unique=False)

    op.create_table(
        MOVIES,
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("genres", sa.String(length=255), nullable=False),
        sa.Column("year", sa.String(length=10), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(IDX_MOVIES_ID, MOVIES, ["id"], unique=False)


def downgrade() -> None:
    """Drop indexes and tables in reverse order of creation."""
    op.drop_index(IDX_MOVIES_ID, table_name=MOVIES)
    op.drop_table(MOVIES)
    op.drop_index(IDX_USERS_EMAIL, table_name=USERS)
    op.drop_index(IDX_USERS_ID, table_name=USERS)
    op.drop_table(USERS)
