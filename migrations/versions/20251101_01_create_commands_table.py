"""create commands table

Revision ID: 20251101_01
Revises:
Create Date: 2025-11-01 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20251101_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "commands",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("command_text", sa.Text(), nullable=False),
        sa.Column("platform", sa.String(length=20), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_commands_platform", "commands", ["platform"])
    op.create_index("ix_commands_updated_at", "commands", ["updated_at"])
    op.create_index("ix_commands_platform_updated_at", "commands", ["platform", "updated_at"])

    # substring search on lower(command_text); only PostgreSQL has trigram indexes
    if op.get_context().dialect.name == "postgresql":
        op.execute("CREATE EXTENSION IF NOT EXISTS pg_trgm")
        op.execute(
            "CREATE INDEX ix_commands_command_text_trgm "
            "ON commands USING gin (lower(command_text) gin_trgm_ops)"
        )


def downgrade() -> None:
    if op.get_context().dialect.name == "postgresql":
        op.execute("DROP INDEX IF EXISTS ix_commands_command_text_trgm")
    op.drop_index("ix_commands_platform_updated_at", table_name="commands")
    op.drop_index("ix_commands_updated_at", table_name="commands")
    op.drop_index("ix_commands_platform", table_name="commands")
    op.drop_table("commands")
