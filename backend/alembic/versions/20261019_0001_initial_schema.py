"""initial provider registry schema

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:01
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261019_0001"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "provider_types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("label", sa.String(length=100), nullable=False),
        sa.Column("attribute_schema_json", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_provider_types_name", "provider_types", ["name"], unique=True)
    op.create_index("ix_provider_types_created_at", "provider_types", ["created_at"], unique=False)

    op.create_table(
        "providers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("address", sa.String(length=512), nullable=True),
        sa.Column("provider_type_id", sa.Integer(), nullable=False),
        sa.Column("attributes_json", sa.JSON(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["provider_type_id"], ["provider_types.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_providers_provider_type_id", "providers", ["provider_type_id"], unique=False)
    op.create_index("ix_providers_status", "providers", ["status"], unique=False)
    op.create_index("ix_providers_created_at", "providers", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_providers_created_at", table_name="providers")
    op.drop_index("ix_providers_status", table_name="providers")
    op.drop_index("ix_providers_provider_type_id", table_name="providers")
    op.drop_table("providers")
    op.drop_index("ix_provider_types_created_at", table_name="provider_types")
    op.drop_index("ix_provider_types_name", table_name="provider_types")
    op.drop_table("provider_types")
