from .invoice_repository import InvoiceRepository
from .settings_repository import SettingsRepository

__all__ = [
    "InvoiceRepository",
    "SettingsRepository",
]
