# gst_invoicing/domain/services/invoice_service.py
"""
Invoice creation: price the items, take the next number, persist.

The service is storage-agnostic. It talks to two collaborators:

* ``settings_repo`` exposes ``get_by_shop``, ``peek_invoice_counter`` and
  ``allocate_invoice_counter`` (atomic take-and-increment).
* ``invoice_repo`` exposes ``create``.

Both repositories share the caller's session; the caller commits after
``create_invoice`` returns or rolls back if it raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from gst_invoicing.core.config import settings
from gst_invoicing.domain.exceptions import InvalidGSTINError, SettingsNotFoundError
from gst_invoicing.domain.models.invoice import GSTCalculationResult, InvoiceDraft
from gst_invoicing.domain.services.amount_in_words import number_to_words
from gst_invoicing.domain.services.gst_calculator import calculate_gst
from gst_invoicing.domain.services.gstin_validation import normalize_gstin, validate_gstin
from gst_invoicing.domain.services.invoice_numbering import format_invoice_number
from gst_invoicing.domain.services.place_of_supply import (
    determine_place_of_supply,
    is_reverse_charge_applicable,
)

logger = logging.getLogger("invoice_service")


@dataclass(frozen=True)
class CreatedInvoice:
    invoice_number: str
    counter: int
    place_of_supply: str
    calculation: GSTCalculationResult
    amount_in_words: str
    record: Any = None


class InvoiceService:
    def __init__(self, settings_repo: Any, invoice_repo: Any) -> None:
        self.settings_repo = settings_repo
        self.invoice_repo = invoice_repo

    async def preview_next_invoice_number(self, shop: str) -> str:
        app_settings = await self._require_settings(shop)
        counter = await self.settings_repo.peek_invoice_counter(shop)
        return format_invoice_number(
            app_settings.invoice_prefix, counter, settings.INVOICE_NUMBER_WIDTH
        )

    async def create_invoice(self, shop: str, draft: InvoiceDraft) -> CreatedInvoice:
        app_settings = await self._require_settings(shop)

        customer_gstin = normalize_gstin(draft.customer_gstin)
        if customer_gstin is not None and not validate_gstin(customer_gstin):
            raise InvalidGSTINError(customer_gstin, field="customer_gstin")

        place_of_supply = determine_place_of_supply(
            draft.billing_address,
            draft.shipping_address,
            is_b2b=customer_gstin is not None,
        )
        reverse_charge = draft.reverse_charge
        if reverse_charge is None:
            reverse_charge = is_reverse_charge_applicable(
                app_settings.company_gstin, customer_gstin
            )

        # Price first: a rejected item must not consume an invoice number
        calculation = calculate_gst(
            draft.items,
            supplier_state=app_settings.company_state,
            recipient_state=place_of_supply,
            reverse_charge=reverse_charge,
        )
        words = number_to_words(calculation.total_amount)

        counter = await self.settings_repo.allocate_invoice_counter(shop)
        invoice_number = format_invoice_number(
            app_settings.invoice_prefix, counter, settings.INVOICE_NUMBER_WIDTH
        )

        record = await self.invoice_repo.create(
            shop=shop,
            invoice_number=invoice_number,
            customer_name=draft.customer_name,
            customer_gstin=customer_gstin,
            place_of_supply=place_of_supply,
            calculation=calculation,
            amount_in_words=words,
            notes=draft.notes,
        )

        logger.info(
            "Invoice created: shop=%s, number=%s, total=%s, inter_state=%s, reverse_charge=%s",
            shop, invoice_number, calculation.total_amount,
            calculation.is_inter_state, calculation.reverse_charge,
        )
        return CreatedInvoice(
            invoice_number=invoice_number,
            counter=counter,
            place_of_supply=place_of_supply,
            calculation=calculation,
            amount_in_words=words,
            record=record,
        )

    async def _require_settings(self, shop: str):
        app_settings = await self.settings_repo.get_by_shop(shop)
        if app_settings is None:
            raise SettingsNotFoundError(shop)
        return app_settings
