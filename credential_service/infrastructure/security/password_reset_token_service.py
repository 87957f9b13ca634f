"""Password reset token service.

Token Strategy:
    - 32-byte random hex string (64 characters)
    - 1-hour expiration
    - Single use: redeemed by one conditional update in the repository
    - Stored in plain text (already unguessable)
"""

from datetime import UTC, datetime, timedelta

from credential_service.core.constants import (
    PASSWORD_RESET_TOKEN_TTL_HOURS,
    TOKEN_BYTES,
)
from credential_service.infrastructure.security.token_generator import (
    generate_random_token,
)


class PasswordResetTokenService:
    """Password reset token generation service.

    Usage:
        service = PasswordResetTokenService()
        token = service.generate_token()
        await user_repo.set_reset_token(
            email, token, service.calculate_expiration()
        )
        reset_url = f"{settings.web_app_url}/reset-password?token={token}"
    """

    def __init__(self, expiration_hours: int = PASSWORD_RESET_TOKEN_TTL_HOURS) -> None:
        """Initialize password reset token service.

        Args:
            expiration_hours: Token lifetime in hours (default: 1).
        """
        self._expiration_hours = expiration_hours

    def generate_token(self) -> str:
        """Generate password reset token.

        Returns:
            64-character hex string (32 bytes of entropy).
        """
        return generate_random_token(TOKEN_BYTES)

    def calculate_expiration(self) -> datetime:
        """Calculate expiration timestamp (UTC) for a token issued now."""
        return datetime.now(UTC) + timedelta(hours=self._expiration_hours)
