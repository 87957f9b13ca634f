"""Centralized constants for internal implementation details.

Values here are fixed by the credential model, not by deployment. For
environment-specific settings use `credential_service.core.config`.

Example:
    >>> from credential_service.core.constants import TOKEN_BYTES
    >>> token = secrets.token_hex(TOKEN_BYTES)
"""

# =============================================================================
# Token and Key Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of bytes for opaque reset/verification tokens (256 bits)."""

TOKEN_MIN_LENGTH: int = 32
"""Shortest token string accepted by the format validator."""

JWT_SECRET_MIN_LENGTH: int = 32
"""Minimum length of the session-token signing secret."""

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""

BCRYPT_MAX_PASSWORD_BYTES: int = 72
"""bcrypt only considers the first 72 bytes of input."""


# =============================================================================
# Password Policy
# =============================================================================

PASSWORD_MIN_LENGTH: int = 8
"""Minimum number of characters in a password."""


# =============================================================================
# Token Lifetimes
# =============================================================================

PASSWORD_RESET_TOKEN_TTL_HOURS: int = 1
"""Password reset tokens expire after one hour."""

EMAIL_VERIFICATION_TOKEN_TTL_HOURS: int = 24
"""Email verification tokens expire after 24 hours."""

SECONDS_PER_HOUR: int = 3600


# =============================================================================
# Logging
# =============================================================================

TOKEN_LOG_PREFIX_LENGTH: int = 8
"""Number of token characters safe to include in log lines."""
