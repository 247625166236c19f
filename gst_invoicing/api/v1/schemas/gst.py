"""Request and response schemas for the GST calculation endpoints."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from gst_invoicing.domain.models.invoice import LineItem


class LineItemIn(BaseModel):
    """One invoice line as submitted by the admin form."""

    description: str = Field(default="", max_length=500)
    hsn_code: str | None = Field(default=None, max_length=8)
    quantity: int
    rate: Decimal
    discount_percent: Decimal = Decimal("0")
    gst_rate_percent: Decimal = Decimal("18")

    def to_domain(self) -> LineItem:
        return LineItem.from_dict(self.model_dump())


class AddressIn(BaseModel):
    state: str | None = None
    city: str | None = None
    pincode: str | None = None


class GSTCalculateRequest(BaseModel):
    items: list[LineItemIn] = Field(default_factory=list)
    supplier_state: str = ""
    recipient_state: str = ""
    reverse_charge: bool = False


class AmountInWordsRequest(BaseModel):
    amount: Decimal


class PlaceOfSupplyRequest(BaseModel):
    billing_address: AddressIn | None = None
    shipping_address: AddressIn | None = None
    is_b2b: bool = False
    supplier_gstin: str | None = None
    customer_gstin: str | None = None
