"""Input validators (pure functions raising ValueError)."""

from credential_service.domain.validators.functions import (
    validate_email,
    validate_strong_password,
    validate_token_format,
)

__all__ = [
    "validate_email",
    "validate_strong_password",
    "validate_token_format",
]
