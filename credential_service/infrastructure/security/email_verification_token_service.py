"""Email verification token service.

Same token shape as password reset (32 random bytes, hex encoded) with a
longer 24-hour lifetime, since the link usually sits in an inbox.
"""

from datetime import UTC, datetime, timedelta

from credential_service.core.constants import (
    EMAIL_VERIFICATION_TOKEN_TTL_HOURS,
    TOKEN_BYTES,
)
from credential_service.infrastructure.security.token_generator import (
    generate_random_token,
)


class EmailVerificationTokenService:
    """Email verification token generation service."""

    def __init__(
        self, expiration_hours: int = EMAIL_VERIFICATION_TOKEN_TTL_HOURS
    ) -> None:
        self._expiration_hours = expiration_hours

    def generate_token(self) -> str:
        """Generate verification token (64 hex characters)."""
        return generate_random_token(TOKEN_BYTES)

    def calculate_expiration(self) -> datetime:
        """Calculate expiration timestamp (UTC) for a token issued now."""
        return datetime.now(UTC) + timedelta(hours=self._expiration_hours)
