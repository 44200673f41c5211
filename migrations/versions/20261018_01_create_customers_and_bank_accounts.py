"""create customers and bank accounts tables

Revision ID: 3f9c2a7d1b04
Revises: 
Create Date: 2026-10-18 09:30:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c2a7d1b04"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
    )

    op.create_table(
        "bank_accounts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("seq", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("balance", sa.Float()),
        sa.Column("currency", sa.String(length=16)),
        sa.Column("type", sa.String(length=20)),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id")),
    )
    op.create_index("ix_bank_accounts_seq", "bank_accounts", ["seq"])
    op.create_index("ix_bank_accounts_created_at", "bank_accounts", ["created_at"])
    op.create_index("ix_bank_accounts_type", "bank_accounts", ["type"])
    op.create_index("ix_bank_accounts_customer_id", "bank_accounts", ["customer_id"])


def downgrade() -> None:
    op.drop_index("ix_bank_accounts_customer_id", table_name="bank_accounts")
    op.drop_index("ix_bank_accounts_type", table_name="bank_accounts")
    op.drop_index("ix_bank_accounts_created_at", table_name="bank_accounts")
    op.drop_index("ix_bank_accounts_seq", table_name="bank_accounts")
    op.drop_table("bank_accounts")
    op.drop_table("customers")
