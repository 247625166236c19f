# gst_invoicing/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from gst_invoicing.api.routes import health_router
from gst_invoicing.api.v1 import v1_router
from gst_invoicing.api.v1.envelope import engine_error, error
from gst_invoicing.core.config import settings
from gst_invoicing.core.logging_config import setup_logging
from gst_invoicing.domain.exceptions import SettingsNotFoundError, TaxEngineError

setup_logging()
logger = logging.getLogger("api")

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

app.include_router(health_router)
app.include_router(v1_router)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    logger.warning("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
    return JSONResponse(error(str(exc.detail)), status_code=exc.status_code)


@app.exception_handler(SettingsNotFoundError)
async def settings_not_found_handler(request: Request, exc: SettingsNotFoundError):
    return JSONResponse(error(str(exc)), status_code=404)


@app.exception_handler(TaxEngineError)
async def tax_engine_error_handler(request: Request, exc: TaxEngineError):
    logger.info("Validation failed on %s: %s", request.url.path, exc)
    return JSONResponse(engine_error(exc), status_code=422)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Constraint violation on %s: %s", request.url.path, exc.orig)
    return JSONResponse(error("Conflicts with an existing record"), status_code=409)
