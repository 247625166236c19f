from fastapi import APIRouter

from gst_invoicing import __version__

router = APIRouter()


@router.get("/")
async def health():
    return {"status": "ok", "message": "GST Invoicing Running", "version": __version__}
