import uuid
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from gst_invoicing.domain.models.invoice import GSTCalculationResult
from gst_invoicing.infrastructure.db.models import Invoice


class InvoiceRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # ---------- small helpers ----------

    @staticmethod
    def _json_safe(value):
        """JSON columns cannot hold Decimal; store money as 2dp strings."""
        if isinstance(value, Decimal):
            return str(value)
        if isinstance(value, dict):
            return {k: InvoiceRepository._json_safe(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [InvoiceRepository._json_safe(v) for v in value]
        return value

    # ---------- main methods ----------

    async def create(
        self,
        *,
        shop: str,
        invoice_number: str,
        customer_name: str,
        calculation: GSTCalculationResult,
        customer_gstin: str | None = None,
        place_of_supply: str | None = None,
        amount_in_words: str | None = None,
        notes: str = "",
        status: str = "DRAFT",
    ) -> Invoice:
        inv = Invoice(
            id=uuid.uuid4(),
            shop=shop,
            invoice_number=invoice_number,
            customer_name=customer_name,
            customer_gstin=customer_gstin,
            place_of_supply=place_of_supply,
            reverse_charge=calculation.reverse_charge,
            is_inter_state=calculation.is_inter_state,
            items=self._json_safe([line.to_dict() for line in calculation.lines]),
            subtotal=calculation.subtotal,
            cgst_amount=calculation.cgst_amount,
            sgst_amount=calculation.sgst_amount,
            igst_amount=calculation.igst_amount,
            total_tax=calculation.total_tax,
            total_amount=calculation.total_amount,
            amount_in_words=amount_in_words,
            status=status,
            notes=notes,
        )
        self.db.add(inv)
        await self.db.flush()
        return inv

    async def get_by_number(self, shop: str, invoice_number: str) -> Invoice | None:
        result = await self.db.execute(
            select(Invoice).where(
                Invoice.shop == shop,
                Invoice.invoice_number == invoice_number,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_shop(self, shop: str, limit: int = 20, offset: int = 0) -> tuple[list[Invoice], int]:
        q = select(Invoice).where(Invoice.shop == shop)
        total = (await self.db.execute(select(func.count()).select_from(q.subquery()))).scalar() or 0
        result = await self.db.execute(
            q.order_by(Invoice.created_at.desc()).offset(offset).limit(limit)
        )
        return list(result.scalars().all()), total
