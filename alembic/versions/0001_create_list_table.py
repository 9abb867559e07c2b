"""Create list table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 12:00:00.000000

Creates the list table: BIGINT identity id, non-blank name and the two
timestamps, with updated_at never earlier than created_at.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create list table."""
    op.create_table(
        "list",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint("updated_at >= created_at", name="ck_list_updated_after_created"),
        sa.CheckConstraint("length(trim(name)) > 0", name="ck_list_name_not_blank"),
    )


def downgrade() -> None:
    """Drop list table."""
    op.drop_table("list")
