# gst_invoicing/api/v1/routes/gst.py
"""
Stateless GST endpoints: calculation, GSTIN lookup, amount in words,
place of supply. Nothing here touches the database.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from gst_invoicing.api.v1.envelope import ok
from gst_invoicing.api.v1.schemas.gst import (
    AmountInWordsRequest,
    GSTCalculateRequest,
    PlaceOfSupplyRequest,
)
from gst_invoicing.domain.services.amount_in_words import number_to_words
from gst_invoicing.domain.services.currency import format_inr
from gst_invoicing.domain.services.gst_calculator import calculate_gst
from gst_invoicing.domain.services.gstin_validation import (
    get_state_from_gstin,
    normalize_gstin,
    pan_from_gstin,
    validate_gstin,
)
from gst_invoicing.domain.services.place_of_supply import (
    determine_place_of_supply,
    is_reverse_charge_applicable,
)
from gst_invoicing.domain.services.state_codes import INDIAN_STATES, state_code_for_name

logger = logging.getLogger("api.v1.gst")

router = APIRouter(prefix="/gst", tags=["GST"])


@router.post("/calculate", response_model=dict)
async def calculate(body: GSTCalculateRequest):
    """Price line items and split tax into CGST/SGST or IGST."""
    result = calculate_gst(
        [item.to_domain() for item in body.items],
        supplier_state=body.supplier_state,
        recipient_state=body.recipient_state,
        reverse_charge=body.reverse_charge,
    )
    data = result.to_dict()
    data["amount_in_words"] = number_to_words(result.total_amount)
    return ok(data=data)


@router.get("/gstin/{gstin}", response_model=dict)
async def gstin_details(gstin: str):
    """Structural GSTIN check plus the state and PAN it encodes."""
    normalized = normalize_gstin(gstin) or ""
    valid = validate_gstin(normalized)
    state = get_state_from_gstin(normalized)
    return ok(data={
        "gstin": normalized,
        "valid": valid,
        "state": state,
        "state_code": normalized[:2] if valid else None,
        "pan": pan_from_gstin(normalized),
    })


@router.post("/amount-in-words", response_model=dict)
async def amount_in_words(body: AmountInWordsRequest):
    return ok(data={
        "amount": body.amount,
        "words": number_to_words(body.amount),
        "formatted": format_inr(body.amount),
    })


@router.post("/place-of-supply", response_model=dict)
async def place_of_supply(body: PlaceOfSupplyRequest):
    pos = determine_place_of_supply(
        body.billing_address,
        body.shipping_address,
        is_b2b=body.is_b2b,
    )
    return ok(data={
        "place_of_supply": pos,
        "state_code": state_code_for_name(pos),
        "reverse_charge_applicable": is_reverse_charge_applicable(
            body.supplier_gstin, body.customer_gstin
        ),
    })


@router.get("/states", response_model=dict)
async def states():
    return ok(data=[{"name": name, "code": code} for name, code in INDIAN_STATES.items()])
