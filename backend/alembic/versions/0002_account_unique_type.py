"""One account per owner, currency and type.

Revision ID: 0002_account_unique_type
Revises: 0001_init
Create Date: 2025-04-18
"""

from alembic import op


revision = "0002_account_unique_type"
down_revision = "0001_init"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_unique_constraint(
        "uq_accounts_owner_currency_type",
        "accounts",
        ["owner_id", "currency", "type"],
    )


def downgrade() -> None:
    op.drop_constraint("uq_accounts_owner_currency_type", "accounts", type_="unique")
