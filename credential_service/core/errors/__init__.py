"""Core errors package.

Usage:
    from credential_service.core.errors import DomainError, ValidationError
"""

from credential_service.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
)
from credential_service.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "DependencyError",
]
