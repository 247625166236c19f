# gst_invoicing/api/v1/routes/invoices.py
"""
Invoice creation, lookup and next-number preview.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from gst_invoicing.api.v1.deps import (
    get_current_shop,
    get_invoice_repository,
    get_invoice_service,
)
from gst_invoicing.api.v1.envelope import ok, paginated
from gst_invoicing.api.v1.schemas.invoices import InvoiceCreate, InvoiceDetail
from gst_invoicing.core.db import get_db
from gst_invoicing.domain.services.invoice_service import InvoiceService
from gst_invoicing.infrastructure.db.repositories import InvoiceRepository

logger = logging.getLogger("api.v1.invoices")

router = APIRouter(prefix="/invoices", tags=["Invoices"])


def _invoice_to_detail(inv) -> dict:
    return InvoiceDetail.model_validate(inv).model_dump()


@router.get("/next-number", response_model=dict)
async def next_invoice_number(
    shop: str = Depends(get_current_shop),
    service: InvoiceService = Depends(get_invoice_service),
):
    """Number the next invoice will receive; does not reserve it."""
    number = await service.preview_next_invoice_number(shop)
    return ok(data={"invoice_number": number})


@router.get("", response_model=dict)
async def list_invoices(
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    shop: str = Depends(get_current_shop),
    repo: InvoiceRepository = Depends(get_invoice_repository),
):
    invoices, total = await repo.list_for_shop(shop, limit=limit, offset=offset)
    return paginated(
        items=[_invoice_to_detail(inv) for inv in invoices],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/{invoice_number}", response_model=dict)
async def get_invoice(
    invoice_number: str,
    shop: str = Depends(get_current_shop),
    repo: InvoiceRepository = Depends(get_invoice_repository),
):
    inv = await repo.get_by_number(shop, invoice_number)
    if not inv:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    return ok(data=_invoice_to_detail(inv))


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    body: InvoiceCreate,
    shop: str = Depends(get_current_shop),
    service: InvoiceService = Depends(get_invoice_service),
    db: AsyncSession = Depends(get_db),
):
    """Number, price and store a new draft invoice in one transaction."""
    try:
        created = await service.create_invoice(shop, body.to_draft())
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    data = created.calculation.to_dict()
    data.update(
        invoice_number=created.invoice_number,
        place_of_supply=created.place_of_supply,
        amount_in_words=created.amount_in_words,
    )
    return ok(data=data, message="Invoice created")
