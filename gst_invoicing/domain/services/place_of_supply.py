# gst_invoicing/domain/services/place_of_supply.py
"""
Reverse-charge and place-of-supply heuristics.

These are simplified rules for goods sold by an online store. Services,
exports and SEZ supplies have their own place-of-supply rules which are not
modelled here.
"""

from __future__ import annotations

from typing import Any

from gst_invoicing.core.config import settings


def is_reverse_charge_applicable(
    supplier_gstin: str | None,
    customer_gstin: str | None,
    amount: Any = None,
) -> bool:
    """
    Unregistered supplier selling to a registered recipient.

    ``amount`` is accepted for call-site compatibility; no threshold is
    applied.
    """
    return not _present(supplier_gstin) and _present(customer_gstin)


def determine_place_of_supply(
    billing_address: Any,
    shipping_address: Any,
    is_b2b: bool = False,
    default: str | None = None,
) -> str:
    """
    B2B: the recipient's billing state. B2C: where goods are delivered,
    falling back to billing and finally to ``DEFAULT_PLACE_OF_SUPPLY``.
    """
    billing_state = _state_of(billing_address)
    shipping_state = _state_of(shipping_address)

    if is_b2b and billing_state:
        return billing_state
    if shipping_state:
        return shipping_state
    return billing_state or default or settings.DEFAULT_PLACE_OF_SUPPLY


def _state_of(address: Any) -> str | None:
    if address is None:
        return None
    if isinstance(address, dict):
        state = address.get("state")
    else:
        state = getattr(address, "state", None)
    if state is None:
        return None
    state = str(state).strip()
    return state or None


def _present(gstin: str | None) -> bool:
    return bool(gstin and str(gstin).strip())
