"""vendors, firms and audit trail

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "vendors",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("client_id", sa.String(100), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("client_id", "username", name="uq_vendors_client_username"),
        sa.UniqueConstraint("client_id", "email", name="uq_vendors_client_email"),
    )
    op.create_index("ix_vendors_client_id", "vendors", ["client_id"])
    op.create_index("ix_vendors_username", "vendors", ["username"])
    op.create_index("ix_vendors_email", "vendors", ["email"])

    op.create_table(
        "firms",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("client_id", sa.String(100), nullable=False),
        sa.Column("firm_name", sa.String(255), nullable=False),
        sa.Column("area", sa.String(255), nullable=False),
        sa.Column("category", sa.JSON(), nullable=False),
        sa.Column("region", sa.JSON(), nullable=False),
        sa.Column("offer", sa.Text(), nullable=True),
        sa.Column("image", sa.String(500), nullable=True),
        sa.Column(
            "vendor_id",
            sa.String(36),
            sa.ForeignKey("vendors.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_firms_client_id", "firms", ["client_id"])
    op.create_index("ix_firms_firm_name", "firms", ["firm_name"])
    op.create_index("ix_firms_vendor_id", "firms", ["vendor_id"])
    op.create_index(
        "uq_firms_client_live_name",
        "firms",
        ["client_id", "firm_name"],
        unique=True,
        sqlite_where=sa.text("deleted_at IS NULL"),
        postgresql_where=sa.text("deleted_at IS NULL"),
    )

    op.create_table(
        "audit_trail",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("client_id", sa.String(100), nullable=False),
        sa.Column("vendor_id", sa.String(36), nullable=True),
        sa.Column("ip_address", sa.String(50), nullable=True),
        sa.Column("user_agent", sa.String(512), nullable=True),
        sa.Column("method", sa.String(10), nullable=False),
        sa.Column("path", sa.String(500), nullable=False),
        sa.Column("status_code", sa.Integer(), nullable=False),
        sa.Column("duration_ms", sa.Integer(), nullable=False),
        sa.Column("entity_type", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    for col in ("client_id", "vendor_id", "path", "entity_type", "created_at"):
        op.create_index(f"ix_audit_trail_{col}", "audit_trail", [col])


def downgrade() -> None:
    op.drop_table("audit_trail")
    op.drop_table("firms")
    op.drop_table("vendors")
