# gst_invoicing/domain/models/invoice.py
"""
Value objects passed into and returned from the tax engine.

All of them are frozen: an item handed to ``calculate_gst`` cannot change
underneath the computation, and two results built from the same inputs
compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class LineItem:
    description: str
    quantity: Any
    rate: Any
    gst_rate_percent: Any = Decimal("18")
    discount_percent: Any = Decimal("0")
    hsn_code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "LineItem":
        """Build an item from a form/JSON payload (camelCase or snake_case keys)."""
        return cls(
            description=data.get("description", ""),
            hsn_code=data.get("hsn_code") or data.get("hsnCode"),
            quantity=data.get("quantity"),
            rate=data.get("rate"),
            discount_percent=_first(data, "discount_percent", "discountPercent", "discount", default=Decimal("0")),
            gst_rate_percent=_first(data, "gst_rate_percent", "gstRatePercent", "gstRate", default=Decimal("18")),
        )


@dataclass(frozen=True)
class LineCalculation:
    """Per-item breakdown, rounded to paise."""
    index: int
    description: str
    hsn_code: Optional[str]
    quantity: int
    rate: Decimal
    discount_percent: Decimal
    gst_rate_percent: Decimal
    taxable_amount: Decimal
    cgst_amount: Decimal = ZERO
    sgst_amount: Decimal = ZERO
    igst_amount: Decimal = ZERO

    @property
    def tax_amount(self) -> Decimal:
        return self.cgst_amount + self.sgst_amount + self.igst_amount

    @property
    def total_amount(self) -> Decimal:
        return self.taxable_amount + self.tax_amount

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "hsn_code": self.hsn_code,
            "quantity": self.quantity,
            "rate": self.rate,
            "discount_percent": self.discount_percent,
            "gst_rate_percent": self.gst_rate_percent,
            "taxable_amount": self.taxable_amount,
            "cgst_amount": self.cgst_amount,
            "sgst_amount": self.sgst_amount,
            "igst_amount": self.igst_amount,
            "tax_amount": self.tax_amount,
            "total_amount": self.total_amount,
        }


@dataclass(frozen=True)
class GSTCalculationResult:
    subtotal: Decimal = ZERO
    cgst_amount: Decimal = ZERO
    sgst_amount: Decimal = ZERO
    igst_amount: Decimal = ZERO
    total_tax: Decimal = ZERO
    total_amount: Decimal = ZERO
    is_inter_state: bool = False
    # Informational only: does not change any amount.
    reverse_charge: bool = False
    # Average item rate, for display on the invoice
    cgst_rate: Decimal = ZERO
    sgst_rate: Decimal = ZERO
    igst_rate: Decimal = ZERO
    lines: tuple[LineCalculation, ...] = field(default_factory=tuple)

    def to_dict(self, include_lines: bool = True) -> dict:
        data = {
            "subtotal": self.subtotal,
            "cgst_amount": self.cgst_amount,
            "sgst_amount": self.sgst_amount,
            "igst_amount": self.igst_amount,
            "total_tax": self.total_tax,
            "total_amount": self.total_amount,
            "is_inter_state": self.is_inter_state,
            "reverse_charge": self.reverse_charge,
            "cgst_rate": self.cgst_rate,
            "sgst_rate": self.sgst_rate,
            "igst_rate": self.igst_rate,
        }
        if include_lines:
            data["lines"] = [line.to_dict() for line in self.lines]
        return data


@dataclass(frozen=True)
class InvoiceDraft:
    """Everything the caller knows about an invoice before it is numbered."""
    customer_name: str
    items: tuple[LineItem, ...]
    customer_gstin: Optional[str] = None
    billing_address: Optional[dict] = None
    shipping_address: Optional[dict] = None
    # None means "decide from the GSTIN heuristic"
    reverse_charge: Optional[bool] = None
    notes: str = ""


def _first(data: dict, *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default
