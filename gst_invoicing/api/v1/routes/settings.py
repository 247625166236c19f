# gst_invoicing/api/v1/routes/settings.py
"""
Per-shop invoice settings (onboarding + settings page).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gst_invoicing.api.v1.deps import get_current_shop, get_settings_repository
from gst_invoicing.api.v1.envelope import ok
from gst_invoicing.api.v1.schemas.invoices import SettingsDetail, SettingsUpdate
from gst_invoicing.core.config import settings as app_config
from gst_invoicing.core.db import get_db
from gst_invoicing.domain.exceptions import (
    InvalidGSTINError,
    InvalidInvoiceCounterError,
    SettingsNotFoundError,
)
from gst_invoicing.domain.services.gstin_validation import (
    get_state_from_gstin,
    normalize_gstin,
    validate_gstin,
)
from gst_invoicing.domain.services.invoice_numbering import format_invoice_number
from gst_invoicing.infrastructure.db.repositories import SettingsRepository

logger = logging.getLogger("api.v1.settings")

router = APIRouter(prefix="/settings", tags=["Settings"])


def _settings_to_detail(row) -> dict:
    return SettingsDetail(
        shop=row.shop,
        company_name=row.company_name,
        company_gstin=row.company_gstin,
        company_state=row.company_state,
        invoice_prefix=row.invoice_prefix,
        invoice_counter=row.invoice_counter,
        default_gst_rate=row.default_gst_rate,
        next_invoice_number=format_invoice_number(
            row.invoice_prefix, row.invoice_counter, app_config.INVOICE_NUMBER_WIDTH
        ),
    ).model_dump()


@router.get("", response_model=dict)
async def get_settings(
    shop: str = Depends(get_current_shop),
    repo: SettingsRepository = Depends(get_settings_repository),
):
    row = await repo.get_by_shop(shop)
    if row is None:
        raise SettingsNotFoundError(shop)
    return ok(data=_settings_to_detail(row))


@router.put("", response_model=dict)
async def update_settings(
    body: SettingsUpdate,
    shop: str = Depends(get_current_shop),
    repo: SettingsRepository = Depends(get_settings_repository),
    db: AsyncSession = Depends(get_db),
):
    """Create or update the shop's settings. ``starting_number`` resets the counter."""
    gstin = normalize_gstin(body.company_gstin)
    if gstin is not None and not validate_gstin(gstin):
        logger.info("Rejected settings update for %s: invalid GSTIN %s", shop, gstin)
        raise InvalidGSTINError(gstin, field="company_gstin")

    company_state = body.company_state or get_state_from_gstin(gstin)
    existing = await repo.get_by_shop(shop)
    if (
        existing is not None
        and body.starting_number is not None
        and body.starting_number < existing.invoice_counter
        and (body.invoice_prefix or existing.invoice_prefix) == existing.invoice_prefix
    ):
        # Numbers below the counter may already be issued under this prefix
        raise InvalidInvoiceCounterError(
            f"starting_number {body.starting_number} is below the next invoice number "
            f"{existing.invoice_counter}; change the prefix to restart numbering"
        )

    try:
        row = await repo.upsert(
            shop,
            company_name=body.company_name,
            company_gstin=gstin,
            company_state=company_state,
            invoice_prefix=body.invoice_prefix or (None if existing else app_config.DEFAULT_INVOICE_PREFIX),
            invoice_counter=body.starting_number,
            default_gst_rate=body.default_gst_rate if body.default_gst_rate is not None
            else (None if existing else app_config.DEFAULT_GST_RATE),
        )
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info("Settings saved for %s (prefix=%s, counter=%s)", shop, row.invoice_prefix, row.invoice_counter)
    return ok(data=_settings_to_detail(row), message="Settings saved")
