"""Initial schema: code_snippets table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "code_snippets",
        sa.Column("id", sa.BigInteger, sa.Identity(), primary_key=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("language", sa.String(255), nullable=False),
        sa.Column("stdin", sa.Text, nullable=True),
        sa.Column("source_code", sa.Text, nullable=False),
        sa.Column("stdout", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        schema="public",
    )
    op.create_index(
        "ix_code_snippets_created_at_id",
        "code_snippets",
        [sa.text("created_at DESC"), sa.text("id DESC")],
        schema="public",
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_code_snippets_created_at_id", table_name="code_snippets", schema="public")
    op.drop_table("code_snippets", schema="public")
