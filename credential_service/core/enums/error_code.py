"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention. They stay
internal: HTTP responses only carry the human-readable message.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_WEAK = "password_too_weak"
    INVALID_TOKEN_FORMAT = "invalid_token_format"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    EMAIL_ALREADY_VERIFIED = "email_already_verified"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"

    # Dependency errors
    DATABASE_ERROR = "database_error"
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"
