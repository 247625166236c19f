# gst_invoicing/api/v1/deps.py
"""
FastAPI dependencies for the v1 API layer.

Shop identity comes from the ``X-Shop-Domain`` header set by the embedding
admin frontend; session/OAuth validation happens upstream of this service.
"""

from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from gst_invoicing.core.db import get_db
from gst_invoicing.domain.services.invoice_service import InvoiceService
from gst_invoicing.infrastructure.db.repositories import (
    InvoiceRepository,
    SettingsRepository,
)

logger = logging.getLogger("api.v1.deps")


async def get_current_shop(x_shop_domain: str | None = Header(None)) -> str:
    """Return the shop domain for the request, or 401 if it is missing."""
    shop = (x_shop_domain or "").strip().lower()
    if not shop:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Shop-Domain header",
        )
    return shop


async def get_settings_repository(db: AsyncSession = Depends(get_db)) -> SettingsRepository:
    return SettingsRepository(db)


async def get_invoice_repository(db: AsyncSession = Depends(get_db)) -> InvoiceRepository:
    return InvoiceRepository(db)


async def get_invoice_service(
    settings_repo: SettingsRepository = Depends(get_settings_repository),
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
) -> InvoiceService:
    return InvoiceService(settings_repo, invoice_repo)
