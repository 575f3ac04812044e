"""Create movies table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

Stores the uploaded movie list. `producers` keeps the raw attribution
string; splitting into individual producers happens at calculation time.
"""

import sqlalchemy as sa

from alembic import op


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Apply migration: create movies."""
    op.create_table(
        "movies",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("studios", sa.Text(), nullable=False),
        sa.Column("producers", sa.Text(), nullable=False),
        sa.Column("winner", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_movies_year", "movies", ["year"])
    op.create_index("ix_movies_winner", "movies", ["winner"])


def downgrade() -> None:
    """Rollback migration: drop movies."""
    op.drop_index("ix_movies_winner", table_name="movies")
    op.drop_index("ix_movies_year", table_name="movies")
    op.drop_table("movies")
