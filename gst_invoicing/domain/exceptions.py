# gst_invoicing/domain/exceptions.py
"""
Typed errors raised by the tax engine and the invoice service.

Malformed GSTINs and unknown state codes are *not* errors: the validators
return ``False`` / ``None`` for those and callers branch on the value.
"""

from __future__ import annotations


class TaxEngineError(Exception):
    """Base class for every engine-level validation failure."""


class InvalidLineItemError(TaxEngineError, ValueError):
    """A line item carries a value the engine refuses to price."""

    def __init__(self, message: str, *, index: int | None = None, field: str | None = None):
        self.index = index
        self.field = field
        if index is not None:
            message = f"item {index}: {message}"
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"index": self.index, "field": self.field, "message": str(self)}


class InvalidInvoiceCounterError(TaxEngineError, ValueError):
    """Invoice counters must be positive integers."""


class InvalidAmountError(TaxEngineError, ValueError):
    """Amount cannot be spelled out (negative, NaN or not a number)."""


class SettingsNotFoundError(TaxEngineError):
    """The shop has not completed onboarding, so no prefix/counter exists."""

    def __init__(self, shop: str):
        self.shop = shop
        super().__init__(f"App settings not found for {shop}. Please complete onboarding.")


class InvalidGSTINError(TaxEngineError, ValueError):
    """A GSTIN supplied for storage fails the structural check."""

    def __init__(self, gstin: str, *, field: str = "gstin"):
        self.gstin = gstin
        self.field = field
        super().__init__(f"Invalid GSTIN format: {gstin}")

    def to_dict(self) -> dict:
        return {"index": None, "field": self.field, "message": str(self)}
