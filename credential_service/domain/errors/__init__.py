"""Domain errors package.

Two kinds of error live here:

- Message constants (RegistrationError, LoginError, ...): user-facing
  strings placed in DomainError.message by the handlers.
- Exceptions raised by adapters across a port (DuplicateEmailError,
  EmailDeliveryError, StorageError). Handlers catch these and return
  Failure values.
"""

from credential_service.domain.errors.account_errors import (
    EmailVerificationError,
    LoginError,
    PasswordResetError,
    RegistrationError,
    ServiceError,
    SessionTokenError,
)
from credential_service.domain.errors.port_exceptions import (
    DuplicateEmailError,
    EmailDeliveryError,
    StorageError,
)

__all__ = [
    "RegistrationError",
    "LoginError",
    "PasswordResetError",
    "EmailVerificationError",
    "ServiceError",
    "SessionTokenError",
    "DuplicateEmailError",
    "EmailDeliveryError",
    "StorageError",
]
