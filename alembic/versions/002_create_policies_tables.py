"""create policies and policy_messages tables

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 09:30:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # No unique constraint on (admin_id, policy_number): uniqueness is only
    # enforced when a policy is added, renewals may introduce duplicates.
    op.create_table(
        "policies",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("admin_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone_number", sa.String(50), nullable=False),
        sa.Column("insurance_type", sa.String(100), nullable=False),
        sa.Column("insurance_company", sa.String(255), nullable=False),
        sa.Column("policy_number", sa.String(100), nullable=False),
        sa.Column("policy_start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("policy_end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("premium_amount", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["admin_id"], ["admins.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_policies_admin_id", "policies", ["admin_id"], unique=False)
    op.create_index("ix_policies_policy_number", "policies", ["policy_number"], unique=False)

    op.create_table(
        "policy_messages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("policy_id", sa.String(36), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="pending"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["policy_id"], ["policies.id"], ondelete="CASCADE"),
        sa.CheckConstraint("status IN ('pending', 'sent')", name="ck_policy_messages_status"),
    )
    op.create_index("ix_policy_messages_id", "policy_messages", ["id"], unique=False)
    op.create_index("ix_policy_messages_policy_id", "policy_messages", ["policy_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_policy_messages_policy_id", table_name="policy_messages")
    op.drop_index("ix_policy_messages_id", table_name="policy_messages")
    op.drop_table("policy_messages")
    op.drop_index("ix_policies_policy_number", table_name="policies")
    op.drop_index("ix_policies_admin_id", table_name="policies")
    op.drop_table("policies")
