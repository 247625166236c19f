import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import UUID

from gst_invoicing.infrastructure.db.base import Base


class AppSettings(Base):
    __tablename__ = "app_settings"
    __table_args__ = (CheckConstraint("invoice_counter >= 1", name="ck_app_settings_counter_positive"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    shop = Column(String(255), unique=True, nullable=False, index=True)
    company_name = Column(String(255), nullable=True)
    company_gstin = Column(String(15), nullable=True)
    company_state = Column(String(100), nullable=True)
    invoice_prefix = Column(String(20), nullable=False, default="INV")
    # Next number to issue; advanced only through allocate_invoice_counter
    invoice_counter = Column(Integer, nullable=False, default=1)
    default_gst_rate = Column(Numeric(5, 2), nullable=False, default=18)
    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))
    updated_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (UniqueConstraint("shop", "invoice_number", name="uq_invoices_shop_number"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    shop = Column(String(255), nullable=False, index=True)
    invoice_number = Column(String(50), nullable=False)
    customer_name = Column(String(255), nullable=False)
    customer_gstin = Column(String(15), nullable=True)
    place_of_supply = Column(String(100), nullable=True)
    reverse_charge = Column(Boolean, nullable=False, default=False)
    is_inter_state = Column(Boolean, nullable=False, default=False)
    items = Column(JSON, nullable=False, default=list)
    subtotal = Column(Numeric(14, 2), nullable=False)
    cgst_amount = Column(Numeric(14, 2), nullable=False)
    sgst_amount = Column(Numeric(14, 2), nullable=False)
    igst_amount = Column(Numeric(14, 2), nullable=False)
    total_tax = Column(Numeric(14, 2), nullable=False)
    total_amount = Column(Numeric(14, 2), nullable=False)
    amount_in_words = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="DRAFT")
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))
