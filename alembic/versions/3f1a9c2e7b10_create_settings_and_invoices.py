"""create app_settings and invoices tables

Revision ID: 3f1a9c2e7b10
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = "3f1a9c2e7b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "app_settings",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("shop", sa.String(length=255), nullable=False),
        sa.Column("company_name", sa.String(length=255), nullable=True),
        sa.Column("company_gstin", sa.String(length=15), nullable=True),
        sa.Column("company_state", sa.String(length=100), nullable=True),
        sa.Column("invoice_prefix", sa.String(length=20), nullable=False, server_default="INV"),
        sa.Column("invoice_counter", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("default_gst_rate", sa.Numeric(5, 2), nullable=False, server_default="18"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.CheckConstraint("invoice_counter >= 1", name="ck_app_settings_counter_positive"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_app_settings_shop"), "app_settings", ["shop"], unique=True)

    op.create_table(
        "invoices",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("shop", sa.String(length=255), nullable=False),
        sa.Column("invoice_number", sa.String(length=50), nullable=False),
        sa.Column("customer_name", sa.String(length=255), nullable=False),
        sa.Column("customer_gstin", sa.String(length=15), nullable=True),
        sa.Column("place_of_supply", sa.String(length=100), nullable=True),
        sa.Column("reverse_charge", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_inter_state", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("items", sa.JSON(), nullable=False),
        sa.Column("subtotal", sa.Numeric(14, 2), nullable=False),
        sa.Column("cgst_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("sgst_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("igst_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("total_tax", sa.Numeric(14, 2), nullable=False),
        sa.Column("total_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("amount_in_words", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="DRAFT"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("shop", "invoice_number", name="uq_invoices_shop_number"),
    )
    op.create_index(op.f("ix_invoices_shop"), "invoices", ["shop"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_invoices_shop"), table_name="invoices")
    op.drop_table("invoices")
    op.drop_index(op.f("ix_app_settings_shop"), table_name="app_settings")
    op.drop_table("app_settings")
