"""
Centralized exception handlers.

Every error leaves the API as an ``ApiResponse`` error envelope
(``{"success": false, "message": ...}``) with the matching status code.
Register the handlers with ``register_exception_handlers(app)``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..schemas.response import ApiResponse


logger = logging.getLogger(__name__)


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ApiResponse.error_content(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed path parameters or request bodies."""
    logger.warning("Request validation failed for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=422,
        content=ApiResponse.error_content("Request validation failed"),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include the exception text only in debug mode."""
    logger.exception("Unhandled exception: %s", exc)
    debug = getattr(request.app.state, "debug", False)
    message = str(exc) if debug else "Internal server error"
    return JSONResponse(status_code=500, content=ApiResponse.error_content(message))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
