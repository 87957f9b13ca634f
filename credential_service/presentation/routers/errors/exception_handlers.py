"""Global exception handlers for FastAPI application.

Handlers:
    validation_exception_handler: RequestValidationError -> 400 "Invalid request body"
    generic_exception_handler: anything unhandled -> 500, logged

Both answer in the same {"error": ...} shape as the endpoints.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from credential_service.core.container import get_logger
from credential_service.domain.errors import ServiceError
from credential_service.presentation.routers.errors.responses import error_response

INVALID_REQUEST_BODY = "Invalid request body"


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError (malformed JSON, wrong types) to 400."""
    assert isinstance(exc, RequestValidationError)

    get_logger().info(
        "Rejected malformed request body",
        path=str(request.url.path),
        error_count=len(exc.errors()),
    )
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_BODY)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking details to the client."""
    get_logger().error(
        "Unhandled exception",
        error=exc,
        path=str(request.url.path),
        method=request.method,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ServiceError.INTERNAL)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
