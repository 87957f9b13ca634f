"""Common error classes returned by the application handlers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found
- ConflictError: Duplicate or state conflicts (email taken, already verified)
- AuthenticationError: Bad credentials, invalid or expired tokens
- DependencyError: Storage or email transport failure

Usage:
    from credential_service.core.errors import ValidationError
    from credential_service.core.enums import ErrorCode
    from credential_service.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="invalid email format",
        field="email",
    ))
"""

from dataclasses import dataclass

from credential_service.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User).
        resource_id: Identifier used for the lookup.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, token expired)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class DependencyError(DomainError):
    """A storage or delivery dependency failed.

    Surfaced to clients as an internal error; never retried.

    Attributes:
        dependency: Name of the failing dependency (database, email).
    """

    dependency: str
