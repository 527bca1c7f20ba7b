import logging
import traceback
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from app.utils.exceptions import AppException, ErrorCode

logger = logging.getLogger(__name__)


def _error_body(message: str, code: str, details: list | None = None, field: str | None = None) -> dict:
    return {
        "success": False,
        "message": message,
        "error": {
            "code": code,
            "details": details,
            "field": field,
        }
    }


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle all AppException subclasses (our custom exceptions)."""
    detail = exc.detail
    if exc.status_code == status.HTTP_409_CONFLICT:
        logger.warning(f"Conflict on {request.method} {request.url.path}: {detail.get('message')}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": detail.get("message", "An error occurred"),
            "error": detail.get("error", {"code": ErrorCode.INTERNAL_SERVER_ERROR}),
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle request validation errors.
    Every failing field (body, query or path) is reported in one 400 response
    before any service logic runs.
    """
    details = []
    for error in exc.errors():
        # loc is a tuple like ("body", "email") or ("query", "page")
        loc = error.get("loc", [])
        field = ".".join(str(l) for l in loc if l not in ("body", "query", "path")) if loc else "unknown"
        message = error.get("msg", "Invalid value")
        # pydantic prefixes messages raised from our own validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({
            "field": field or "body",
            "message": message,
        })

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Validation error. Please check your input.",
                            ErrorCode.VALIDATION_ERROR, details=details),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """
    Handle SQLAlchemy IntegrityError (unique constraint violations, FK violations).
    Prevents raw DB errors from leaking to the client.
    """
    logger.warning(f"IntegrityError on {request.method} {request.url}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=_error_body("A record with this data already exists.", ErrorCode.DUPLICATE_ENTRY),
    )


async def operational_error_handler(request: Request, exc: OperationalError) -> JSONResponse:
    """The database could not be reached or dropped the connection mid-request."""
    logger.error(f"Storage unavailable on {request.method} {request.url}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("The data store is currently unavailable. Please try again later.",
                            ErrorCode.STORAGE_UNAVAILABLE),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all handler for unexpected exceptions.
    Logs the full traceback, returns a safe 500 response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url}\n"
        f"{''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("An unexpected error occurred. Please try again later.",
                            ErrorCode.INTERNAL_SERVER_ERROR),
    )
