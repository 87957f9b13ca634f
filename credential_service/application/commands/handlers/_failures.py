"""Failure builders shared by the account handlers."""

from credential_service.core.enums import ErrorCode
from credential_service.core.errors import DependencyError, ValidationError
from credential_service.core.result import Failure
from credential_service.domain.errors import ServiceError


def validation_failure(
    error: ValueError, *, code: ErrorCode, field: str
) -> Failure[ValidationError]:
    """Wrap a validator's ValueError; its message is shown to the client."""
    return Failure(error=ValidationError(code=code, message=str(error), field=field))


def storage_failure() -> Failure[DependencyError]:
    return Failure(
        error=DependencyError(
            code=ErrorCode.DATABASE_ERROR,
            message=ServiceError.DATABASE_ERROR,
            dependency="database",
        )
    )


def email_failure() -> Failure[DependencyError]:
    return Failure(
        error=DependencyError(
            code=ErrorCode.EMAIL_DELIVERY_FAILED,
            message=ServiceError.EMAIL_DELIVERY_FAILED,
            dependency="email",
        )
    )
