"""Initial schema.

Revision ID: 001
Revises:
Create Date: 2025-01-01 00:00:00.000000
"""

import sqlalchemy as sa

from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "recommendations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(300), unique=True, nullable=False),
        sa.Column("youtube_link", sa.String(1000), nullable=False),
        sa.Column("score", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime, server_default=sa.func.now()),
        sqlite_autoincrement=True,
    )
    # Top-N ranking
    op.create_index("ix_recommendations_score", "recommendations", ["score"])


def downgrade() -> None:
    op.drop_index("ix_recommendations_score", table_name="recommendations")
    op.drop_table("recommendations")
