# gst_invoicing/api/v1/__init__.py
"""
Versioned API v1: aggregates all sub-routers under ``/api/v1``.

Usage in ``main.py``::

    from gst_invoicing.api.v1 import v1_router
    app.include_router(v1_router)
"""

from fastapi import APIRouter

from gst_invoicing.api.v1.routes.gst import router as gst_router
from gst_invoicing.api.v1.routes.invoices import router as invoices_router
from gst_invoicing.api.v1.routes.settings import router as settings_router

v1_router = APIRouter(prefix="/api/v1")

v1_router.include_router(gst_router)
v1_router.include_router(invoices_router)
v1_router.include_router(settings_router)

__all__ = ["v1_router"]
