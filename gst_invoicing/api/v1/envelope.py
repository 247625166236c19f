# gst_invoicing/api/v1/envelope.py
"""
Response envelope shared by every v1 endpoint.

    {"status": "ok" | "error", "data": ..., "message": ..., "errors": [...]}

Money values stay ``Decimal`` inside ``data``; FastAPI serialises them.
``errors`` is set for line-item and GSTIN failures, one dict per bad field.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from gst_invoicing.domain.exceptions import InvalidGSTINError, InvalidLineItemError, TaxEngineError

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    status: str = "ok"
    data: T | None = None
    message: str | None = None
    errors: list[dict[str, Any]] | None = None


class InvoicePage(BaseModel, Generic[T]):
    """One page of a shop's invoices."""

    items: list[T]
    total: int
    limit: int
    offset: int
    has_more: bool


def ok(data: Any = None, message: str | None = None) -> dict:
    return ApiResponse(status="ok", data=data, message=message).model_dump()


def error(message: str, errors: list[dict[str, Any]] | None = None) -> dict:
    return ApiResponse(status="error", message=message, errors=errors).model_dump()


def engine_error(exc: TaxEngineError) -> dict:
    """Error envelope for a tax engine failure; item and GSTIN errors name the field."""
    errors = [exc.to_dict()] if isinstance(exc, (InvalidLineItemError, InvalidGSTINError)) else None
    return error(str(exc), errors=errors)


def paginated(items: list, total: int, limit: int, offset: int) -> dict:
    page = InvoicePage(
        items=items,
        total=total,
        limit=limit,
        offset=offset,
        has_more=(offset + limit) < total,
    )
    return ApiResponse(status="ok", data=page).model_dump()
