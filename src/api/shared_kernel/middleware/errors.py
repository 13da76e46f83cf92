"""Exception handlers rendering every error as ``{"error": ...}``.

Handlers raise ``HTTPException`` with a localized message or a mapping of
field errors as ``detail``; the body carries that detail under ``error``.
Anything unexpected becomes a localized 500 and is logged with its
traceback.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from shared_kernel.i18n import Language, MessageCatalog, resolve_language
from shared_kernel.middleware.observability import (
    DefaultRequestErrorProbe,
    RequestErrorProbe,
)

ERROR_MESSAGES = MessageCatalog(
    {
        Language.EN: {
            "internal": "Internal server error.",
            "malformed": "Malformed request body.",
        },
        Language.AR: {
            "internal": "خطأ داخلي في الخادم.",
            "malformed": "نص الطلب غير صالح.",
        },
    }
)


def _language(request: Request) -> Language:
    return resolve_language(request.headers.get("accept-language"))


def register_exception_handlers(
    app: FastAPI,
    probe: RequestErrorProbe | None = None,
) -> None:
    """Install the error handlers on ``app``.

    Args:
        app: The FastAPI application
        probe: Probe for unhandled errors (defaults to structlog)
    """
    error_probe = probe or DefaultRequestErrorProbe()

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error_probe.malformed_request(
            path=request.url.path, error_count=len(exc.errors())
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": ERROR_MESSAGES.get("malformed", _language(request))},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        error_probe.unhandled_error(
            method=request.method, path=request.url.path, error=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": ERROR_MESSAGES.get("internal", _language(request))},
        )
