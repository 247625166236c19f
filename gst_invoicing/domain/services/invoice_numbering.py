# gst_invoicing/domain/services/invoice_numbering.py
"""
Invoice number formatting.

The counter itself lives in ``app_settings.invoice_counter`` and is
allocated atomically by ``SettingsRepository.allocate_invoice_counter``.
This module only turns an allocated counter into the printed number.
"""

from __future__ import annotations

from gst_invoicing.domain.exceptions import InvalidInvoiceCounterError

DEFAULT_WIDTH = 4


def format_invoice_number(prefix: str | None, counter: int, width: int = DEFAULT_WIDTH) -> str:
    """
    ``format_invoice_number("INV", 1) == "INV0001"``.

    Counters wider than ``width`` are printed in full, never truncated:
    ``format_invoice_number("INV", 10000) == "INV10000"``.
    """
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise InvalidInvoiceCounterError(f"Invoice counter must be an integer, got {counter!r}")
    if counter < 1:
        raise InvalidInvoiceCounterError(f"Invoice counter must be positive, got {counter}")
    return f"{prefix or ''}{str(counter).zfill(width)}"
