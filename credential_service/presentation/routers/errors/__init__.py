"""Error mapping and global exception handlers."""

from credential_service.presentation.routers.errors.exception_handlers import (
    register_exception_handlers,
)
from credential_service.presentation.routers.errors.responses import (
    error_response,
    failure_response,
)

__all__ = ["register_exception_handlers", "error_response", "failure_response"]
