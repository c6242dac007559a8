"""Map errors to the {ok: false, error} response body with the status for their kind."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mayastory.core.exceptions import AccountError, StoreUnavailableError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
    if isinstance(exc, StoreUnavailableError):
        logger.warning(
            "Store unavailable: %s",
            exc.message,
            extra={"path": request.url.path, "error_kind": type(exc).__name__},
        )
    return _error_response(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Malformed JSON or wrong field types are invalid input (400), not 422."""
    logger.debug("Request validation failed", extra={"path": request.url.path, "errors": len(exc.errors())})
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def http_error_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unknown errors: full detail goes to the log, the caller gets a generic message."""
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "reason": str(exc)[:500]},
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AccountError, account_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
