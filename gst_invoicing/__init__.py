"""GST invoicing engine for Indian e-commerce merchants."""

__version__ = "0.1.0"
