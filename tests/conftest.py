"""Shared test fixtures for the GST invoicing test suite."""

import asyncio
import uuid
from decimal import Decimal
from types import SimpleNamespace

import pytest

from gst_invoicing.domain.exceptions import SettingsNotFoundError
from gst_invoicing.domain.models.invoice import LineItem


@pytest.fixture(scope="session")
def event_loop():
    """Use a single event loop for the entire test session."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture
def widget_items() -> list[LineItem]:
    """Two widgets at Rs 500, 18% GST, no discount."""
    return [
        LineItem(
            description="Widget",
            quantity=2,
            rate=Decimal("500"),
            discount_percent=Decimal("0"),
            gst_rate_percent=Decimal("18"),
        )
    ]


@pytest.fixture
def mixed_items() -> list[LineItem]:
    """A realistic cart: mixed rates, a discount and an odd-paise line."""
    return [
        LineItem(description="Cotton Kurta", hsn_code="6211", quantity=3, rate="799.00",
                 discount_percent="10", gst_rate_percent="5"),
        LineItem(description="Phone Case", hsn_code="3926", quantity=1, rate="249.99",
                 gst_rate_percent="18"),
        LineItem(description="Steel Bottle", hsn_code="7323", quantity=7, rate="133.33",
                 discount_percent="2.5", gst_rate_percent="12"),
        LineItem(description="Sparkling Water", hsn_code="2202", quantity=2, rate="45.50",
                 gst_rate_percent="28"),
    ]


# ---------------------------------------------------------------------------
# In-memory collaborators for InvoiceService
# ---------------------------------------------------------------------------

class FakeSettingsRepository:
    """
    Stands in for SettingsRepository.

    ``allocate_invoice_counter`` holds a lock across its read and write, the
    same guarantee the single UPDATE ... RETURNING statement gives in
    Postgres. The ``sleep(0)`` yields to other tasks mid-allocation so the
    test would catch a non-atomic implementation.
    """

    def __init__(self):
        self.rows: dict[str, SimpleNamespace] = {}
        self.allocations = 0
        self._lock = asyncio.Lock()

    def seed(self, shop: str, **fields) -> SimpleNamespace:
        row = SimpleNamespace(
            shop=shop,
            company_name=fields.get("company_name", "Acme Retail"),
            company_gstin=fields.get("company_gstin", "27AABCU9603R1ZX"),
            company_state=fields.get("company_state", "Maharashtra"),
            invoice_prefix=fields.get("invoice_prefix", "INV"),
            invoice_counter=fields.get("invoice_counter", 1),
            default_gst_rate=fields.get("default_gst_rate", Decimal("18")),
        )
        self.rows[shop] = row
        return row

    async def get_by_shop(self, shop):
        return self.rows.get(shop)

    async def upsert(self, shop, **fields):
        row = self.rows.get(shop) or self.seed(shop, company_gstin=None, company_state=None)
        for key, value in fields.items():
            if value is not None:
                setattr(row, key, value)
        return row

    async def peek_invoice_counter(self, shop):
        if shop not in self.rows:
            raise SettingsNotFoundError(shop)
        return self.rows[shop].invoice_counter

    async def allocate_invoice_counter(self, shop):
        async with self._lock:
            row = self.rows.get(shop)
            if row is None:
                raise SettingsNotFoundError(shop)
            current = row.invoice_counter
            await asyncio.sleep(0)
            row.invoice_counter = current + 1
            self.allocations += 1
            return current


class FakeInvoiceRepository:
    def __init__(self):
        self.invoices: list[SimpleNamespace] = []

    async def create(self, *, shop, invoice_number, customer_name, calculation,
                     customer_gstin=None, place_of_supply=None, amount_in_words=None,
                     notes="", status="DRAFT"):
        await asyncio.sleep(0)
        record = SimpleNamespace(
            id=uuid.uuid4(),
            shop=shop,
            invoice_number=invoice_number,
            customer_name=customer_name,
            customer_gstin=customer_gstin,
            place_of_supply=place_of_supply,
            reverse_charge=calculation.reverse_charge,
            is_inter_state=calculation.is_inter_state,
            items=[line.to_dict() for line in calculation.lines],
            subtotal=calculation.subtotal,
            cgst_amount=calculation.cgst_amount,
            sgst_amount=calculation.sgst_amount,
            igst_amount=calculation.igst_amount,
            total_tax=calculation.total_tax,
            total_amount=calculation.total_amount,
            amount_in_words=amount_in_words,
            status=status,
            notes=notes,
            created_at=None,
        )
        self.invoices.append(record)
        return record

    async def get_by_number(self, shop, invoice_number):
        for inv in self.invoices:
            if inv.shop == shop and inv.invoice_number == invoice_number:
                return inv
        return None

    async def list_for_shop(self, shop, limit=20, offset=0):
        mine = [inv for inv in self.invoices if inv.shop == shop]
        return mine[offset:offset + limit], len(mine)


@pytest.fixture
def settings_repo() -> FakeSettingsRepository:
    return FakeSettingsRepository()


@pytest.fixture
def invoice_repo() -> FakeInvoiceRepository:
    return FakeInvoiceRepository()
