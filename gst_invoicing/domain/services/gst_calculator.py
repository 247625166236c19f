# gst_invoicing/domain/services/gst_calculator.py
"""
GST split computation for a set of invoice line items.

Rounding discipline
-------------------
Money is rounded to paise (ROUND_HALF_UP, i.e. half away from zero for the
non-negative amounts priced here) once per line:

    taxable  = round(quantity * rate * (1 - discount / 100))
    line_gst = round(taxable * gst_rate / 100)

Intra-state lines then take ``cgst = round(line_gst / 2)`` and
``sgst = line_gst - cgst`` so the halves always add back to ``line_gst``.
Invoice totals are plain sums of already-rounded line values, which keeps
``total_amount == subtotal + total_tax`` and
``total_tax == cgst + sgst + igst`` exact.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable

from gst_invoicing.domain.exceptions import InvalidAmountError, InvalidLineItemError
from gst_invoicing.domain.models.invoice import (
    ZERO,
    GSTCalculationResult,
    LineCalculation,
    LineItem,
)
from gst_invoicing.domain.services.state_codes import same_state

logger = logging.getLogger("gst_calculator")

PAISE = Decimal("0.01")
HUNDRED = Decimal("100")
TWO = Decimal("2")
# Largest value a Numeric(14, 2) money column holds
MAX_AMOUNT = Decimal("999999999999.99")


def round_money(value: Decimal) -> Decimal:
    return value.quantize(PAISE, rounding=ROUND_HALF_UP)


def calculate_gst(
    items: Iterable[LineItem],
    supplier_state: str | None,
    recipient_state: str | None,
    reverse_charge: bool = False,
) -> GSTCalculationResult:
    """
    Price ``items`` and split their GST between CGST/SGST or IGST.

    The supply is inter-state when the canonicalised supplier and recipient
    states differ (see ``state_codes.canonical_state``). ``reverse_charge``
    is carried into the result unchanged and does not alter any amount.

    Raises ``InvalidLineItemError`` for a non-positive or fractional
    quantity, a negative rate, a discount/GST rate outside 0-100, or a
    line whose total would not fit ``MAX_AMOUNT``. ``InvalidAmountError``
    when the lines fit but the invoice total does not.
    """
    items = list(items)
    is_inter_state = not same_state(supplier_state, recipient_state)

    lines = tuple(
        compute_line(item, is_inter_state, index=index)
        for index, item in enumerate(items)
    )

    subtotal = sum((line.taxable_amount for line in lines), ZERO)
    cgst = sum((line.cgst_amount for line in lines), ZERO)
    sgst = sum((line.sgst_amount for line in lines), ZERO)
    igst = sum((line.igst_amount for line in lines), ZERO)
    total_tax = cgst + sgst + igst
    if subtotal + total_tax > MAX_AMOUNT:
        raise InvalidAmountError(f"Invoice total must not exceed {MAX_AMOUNT}")

    avg_rate = ZERO
    if lines:
        avg_rate = sum((line.gst_rate_percent for line in lines), Decimal("0")) / len(lines)
        avg_rate = round_money(avg_rate)

    result = GSTCalculationResult(
        subtotal=subtotal,
        cgst_amount=cgst,
        sgst_amount=sgst,
        igst_amount=igst,
        total_tax=total_tax,
        total_amount=subtotal + total_tax,
        is_inter_state=is_inter_state,
        reverse_charge=bool(reverse_charge),
        cgst_rate=ZERO if is_inter_state else round_money(avg_rate / TWO),
        sgst_rate=ZERO if is_inter_state else round_money(avg_rate / TWO),
        igst_rate=avg_rate if is_inter_state else ZERO,
        lines=lines,
    )

    logger.debug(
        "GST computed: items=%d, inter_state=%s, subtotal=%s, tax=%s",
        len(lines), is_inter_state, result.subtotal, result.total_tax,
    )
    return result


def compute_line(item: LineItem, is_inter_state: bool, index: int | None = None) -> LineCalculation:
    """Validate one item and compute its rounded taxable value and tax heads."""
    quantity = _quantity(item.quantity, index)
    rate = _decimal(item.rate, "rate", index)
    discount = _decimal(item.discount_percent, "discount_percent", index, default=Decimal("0"))
    gst_rate = _decimal(item.gst_rate_percent, "gst_rate_percent", index)

    if rate < 0:
        raise InvalidLineItemError("rate must not be negative", index=index, field="rate")
    _check_percent(discount, "discount_percent", index)
    _check_percent(gst_rate, "gst_rate_percent", index)

    if rate > MAX_AMOUNT:
        raise InvalidLineItemError(f"rate must not exceed {MAX_AMOUNT}", index=index, field="rate")

    try:
        taxable = round_money(quantity * rate * (HUNDRED - discount) / HUNDRED)
        line_gst = round_money(taxable * gst_rate / HUNDRED)
    except InvalidOperation:
        raise InvalidLineItemError("line amount is too large", index=index, field="rate")
    if taxable + line_gst > MAX_AMOUNT:
        raise InvalidLineItemError(
            f"line total must not exceed {MAX_AMOUNT}", index=index, field="rate"
        )

    cgst = sgst = igst = ZERO
    if is_inter_state:
        igst = line_gst
    else:
        cgst = round_money(line_gst / TWO)
        sgst = line_gst - cgst

    return LineCalculation(
        index=index if index is not None else 0,
        description=item.description,
        hsn_code=item.hsn_code,
        quantity=quantity,
        rate=rate,
        discount_percent=discount,
        gst_rate_percent=gst_rate,
        taxable_amount=taxable,
        cgst_amount=cgst,
        sgst_amount=sgst,
        igst_amount=igst,
    )


def line_taxable_amount(item: LineItem) -> Decimal:
    """``quantity * rate`` less discount, rounded to paise."""
    return compute_line(item, is_inter_state=True).taxable_amount


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------

def _decimal(value: Any, field: str, index: int | None, default: Decimal | None = None) -> Decimal:
    if value is None:
        if default is not None:
            return default
        raise InvalidLineItemError(f"{field} is required", index=index, field=field)
    if isinstance(value, bool):
        raise InvalidLineItemError(f"{field} must be a number", index=index, field=field)
    try:
        dec = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidLineItemError(f"{field} must be a number, got {value!r}", index=index, field=field)
    if not dec.is_finite():
        raise InvalidLineItemError(f"{field} must be finite", index=index, field=field)
    return dec


def _quantity(value: Any, index: int | None) -> int:
    dec = _decimal(value, "quantity", index)
    if dec != dec.to_integral_value():
        raise InvalidLineItemError("quantity must be a whole number", index=index, field="quantity")
    if dec <= 0:
        raise InvalidLineItemError("quantity must be positive", index=index, field="quantity")
    return int(dec)


def _check_percent(value: Decimal, field: str, index: int | None) -> None:
    if value < 0 or value > HUNDRED:
        raise InvalidLineItemError(f"{field} must be between 0 and 100", index=index, field=field)
