"""User-facing error messages for the account workflows.

These are NOT exceptions, they are message constants used when building
DomainError values in the application handlers.
"""


class RegistrationError:
    """Registration-specific errors."""

    EMAIL_ALREADY_EXISTS = "email already exists"


class LoginError:
    """Login errors.

    Unknown email and wrong password share one message so the response
    does not reveal which accounts exist.
    """

    INVALID_CREDENTIALS = "invalid email or password"


class PasswordResetError:
    """Password reset errors."""

    INVALID_OR_EXPIRED_TOKEN = "invalid or expired reset token"


class EmailVerificationError:
    """Email verification errors."""

    USER_NOT_FOUND = "user not found"
    ALREADY_VERIFIED = "email already verified"
    INVALID_OR_EXPIRED_TOKEN = "invalid or expired verification token"


class ServiceError:
    """Errors surfaced as internal server errors."""

    INTERNAL = "internal server error"
    DATABASE_ERROR = "database error occurred"
    EMAIL_DELIVERY_FAILED = "failed to send email"


class SessionTokenError:
    """Session token validation errors."""

    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
