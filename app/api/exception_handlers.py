"""
Exception handlers for the FastAPI application.

Converts domain exceptions, request validation failures and unexpected
errors into JSON responses of the form::

    {"error": {"code": "...", "message": "...", "details": {...}}}
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import ErrorCode, LedgerError

logger = logging.getLogger(__name__)


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    details: Dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: Dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
        }
    }
    if details:
        content["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    """Handle all LedgerError exceptions."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed request bodies, paths and queries.

    Reports one message per offending field; ``body`` and ``query``
    prefixes are dropped from the field path.
    """
    fields: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(x) for x in error["loc"] if x not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        fields.setdefault(field, error["msg"])

    return create_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        code=ErrorCode.VALIDATION_ERROR.value,
        message="Validation failed",
        details={"fields": fields},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code=ErrorCode.INTERNAL_ERROR.value,
        message="An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(LedgerError, ledger_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Catch-all; Starlette routes it through ServerErrorMiddleware
    app.add_exception_handler(Exception, generic_exception_handler)
