"""Initial schema: gadgets

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "gadgets",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("type", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price_per_day", sa.Float(), nullable=True),
        sa.Column("availability", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("owner", sa.String(255), nullable=True),
        sa.Column("rented_by", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_gadgets_owner", "gadgets", ["owner"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_gadgets_owner", "gadgets")
    op.drop_table("gadgets")
