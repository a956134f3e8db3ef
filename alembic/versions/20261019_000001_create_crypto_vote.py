"""create crypto_vote table

Revision ID: 5c1e9a7b2d40
Revises: 
Create Date: 2026-10-19 09:00:00

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5c1e9a7b2d40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "crypto_vote",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("up_vote", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("down_vote", sa.Integer(), nullable=False, server_default="0"),
        sa.UniqueConstraint("name", name="uq_crypto_vote_name"),
    )


def downgrade() -> None:
    op.drop_table("crypto_vote")
