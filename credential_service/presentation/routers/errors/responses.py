"""Build {"error": ...} responses from domain errors.

Each endpoint has its own status for client errors (login answers 401,
the others 400). DependencyError is always a 500 with a generic message,
so storage or transport details never reach the client.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from credential_service.core.errors import DependencyError, DomainError
from credential_service.domain.errors import ServiceError
from credential_service.schemas.auth_schemas import ErrorResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def failure_response(
    error: DomainError, client_error_status: int = status.HTTP_400_BAD_REQUEST
) -> JSONResponse:
    """Map a handler failure to an HTTP response.

    Args:
        error: DomainError from a Failure.
        client_error_status: Status for every non-dependency error.

    Returns:
        JSONResponse with an ErrorResponse body.
    """
    if isinstance(error, DependencyError):
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, ServiceError.INTERNAL
        )
    return error_response(client_error_status, error.message)
