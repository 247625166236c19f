"""Request and response schemas for invoice and settings endpoints."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from gst_invoicing.api.v1.schemas.gst import AddressIn, LineItemIn
from gst_invoicing.domain.models.invoice import InvoiceDraft


class InvoiceCreate(BaseModel):
    customer_name: str = Field(min_length=1, max_length=255)
    customer_gstin: str | None = Field(default=None, max_length=20)
    billing_address: AddressIn | None = None
    shipping_address: AddressIn | None = None
    items: list[LineItemIn] = Field(min_length=1)
    reverse_charge: bool | None = None
    notes: str = ""

    def to_draft(self) -> InvoiceDraft:
        return InvoiceDraft(
            customer_name=self.customer_name,
            customer_gstin=self.customer_gstin,
            billing_address=self.billing_address.model_dump() if self.billing_address else None,
            shipping_address=self.shipping_address.model_dump() if self.shipping_address else None,
            items=tuple(item.to_domain() for item in self.items),
            reverse_charge=self.reverse_charge,
            notes=self.notes,
        )


class InvoiceDetail(BaseModel):
    """Full invoice detail returned in responses."""

    invoice_number: str
    customer_name: str
    customer_gstin: str | None
    place_of_supply: str | None
    reverse_charge: bool
    is_inter_state: bool
    items: list[dict]
    subtotal: Decimal
    cgst_amount: Decimal
    sgst_amount: Decimal
    igst_amount: Decimal
    total_tax: Decimal
    total_amount: Decimal
    amount_in_words: str | None
    status: str
    notes: str | None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class SettingsUpdate(BaseModel):
    company_name: str | None = Field(default=None, max_length=255)
    company_gstin: str | None = Field(default=None, max_length=20)
    company_state: str | None = Field(default=None, max_length=100)
    invoice_prefix: str | None = Field(default=None, min_length=1, max_length=20)
    starting_number: int | None = Field(default=None, ge=1)
    default_gst_rate: Decimal | None = Field(default=None, ge=0, le=100)


class SettingsDetail(BaseModel):
    shop: str
    company_name: str | None
    company_gstin: str | None
    company_state: str | None
    invoice_prefix: str
    invoice_counter: int
    default_gst_rate: Decimal
    next_invoice_number: str

    model_config = {"from_attributes": True}
