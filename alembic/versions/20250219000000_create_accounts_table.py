"""Create accounts table with a unique index on name.

Revision ID: 20250219000000
Revises:
Create Date: 2025-02-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20250219000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=13), nullable=False),
        sa.Column("password", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("birthday", sa.Date(), nullable=False),
        sa.Column("gender", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "creation",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column("banned", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("loggedin", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("tos", sa.Integer(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_accounts")),
    )
    # Authoritative guard against duplicate names under concurrent registration.
    op.create_index(
        op.f("ix_accounts_name"),
        "accounts",
        ["name"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_accounts_name"), table_name="accounts")
    op.drop_table("accounts")
