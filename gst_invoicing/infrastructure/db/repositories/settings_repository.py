# gst_invoicing/infrastructure/db/repositories/settings_repository.py
"""
Per-shop invoice settings and the invoice counter.

The counter is only ever advanced by a single ``UPDATE ... RETURNING``
statement so that concurrent invoice creation for the same shop can never
hand out the same number twice. Repositories flush but never commit; the
request handler owns the transaction.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gst_invoicing.domain.exceptions import SettingsNotFoundError
from gst_invoicing.infrastructure.db.models import AppSettings

logger = logging.getLogger("settings_repository")

_UPDATABLE_FIELDS = {
    "company_name",
    "company_gstin",
    "company_state",
    "invoice_prefix",
    "invoice_counter",
    "default_gst_rate",
}


class SettingsRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_shop(self, shop: str) -> AppSettings | None:
        result = await self.db.execute(
            select(AppSettings).where(AppSettings.shop == shop)
        )
        return result.scalar_one_or_none()

    async def upsert(self, shop: str, **fields: Any) -> AppSettings:
        """Create the shop's settings row, or update the given fields in place."""
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown settings fields: {sorted(unknown)}")

        row = await self.get_by_shop(shop)
        if row is None:
            row = AppSettings(shop=shop, **{k: v for k, v in fields.items() if v is not None})
            self.db.add(row)
        else:
            for key, value in fields.items():
                if value is not None:
                    setattr(row, key, value)
        await self.db.flush()
        return row

    async def peek_invoice_counter(self, shop: str) -> int:
        """Counter value the next invoice will receive (no increment)."""
        result = await self.db.execute(
            select(AppSettings.invoice_counter).where(AppSettings.shop == shop)
        )
        counter = result.scalar_one_or_none()
        if counter is None:
            raise SettingsNotFoundError(shop)
        return counter

    async def allocate_invoice_counter(self, shop: str) -> int:
        """
        Atomically take the current counter and advance it by one.

        Returns the value allocated to the caller's invoice.
        """
        result = await self.db.execute(
            update(AppSettings)
            .where(AppSettings.shop == shop)
            .values(invoice_counter=AppSettings.invoice_counter + 1)
            .returning(AppSettings.invoice_counter)
        )
        advanced = result.scalar_one_or_none()
        if advanced is None:
            raise SettingsNotFoundError(shop)
        logger.debug("Allocated invoice counter %d for %s", advanced - 1, shop)
        return advanced - 1
