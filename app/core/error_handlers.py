# File: /app/core/error_handlers.py | Version: 2.0 | Title: Standardized Error Handlers ({errors, data:{status}} envelope)
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

log = logging.getLogger(__name__)

_STATUS_TEXT = {
    400: "Bad request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not found",
    405: "Method not allowed",
    422: "Unprocessable request",
    500: "Internal server error",
}


def _err(code: int, message: str) -> dict:
    return {"errors": [message], "data": {"status": _STATUS_TEXT.get(code, "Error")}}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def _http_exc(_req: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_err(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_exc(_req: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content=_err(422, "Validation error"))

    @app.exception_handler(Exception)
    async def _unhandled(req: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", req.method, req.url.path, exc_info=exc)
        # Avoid leaking internals
        return JSONResponse(
            status_code=500, content=_err(500, "A technical error has occurred")
        )
