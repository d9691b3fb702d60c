"""Create rsvps table.

Revision ID: 3f2a9c1d7e45
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e45"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the rsvps table with unique email and update token."""
    op.create_table(
        "rsvps",
        sa.Column("uuid", sqlalchemy_utils.UUIDType(binary=False), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("attending", sa.Boolean(), nullable=False),
        sa.Column("num_of_guests", sa.Integer(), nullable=True),
        sa.Column("num_of_children", sa.Integer(), nullable=True),
        sa.Column("update_token", sa.String(64), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
    )
    op.create_index("ix_rsvps_email", "rsvps", ["email"], unique=True)
    op.create_index("ix_rsvps_update_token", "rsvps", ["update_token"], unique=True)
    op.create_index("ix_rsvps_attending", "rsvps", ["attending"])


def downgrade() -> None:
    """Drop the rsvps table."""
    op.drop_index("ix_rsvps_attending", table_name="rsvps")
    op.drop_index("ix_rsvps_update_token", table_name="rsvps")
    op.drop_index("ix_rsvps_email", table_name="rsvps")
    op.drop_table("rsvps")
