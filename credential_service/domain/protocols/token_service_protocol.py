"""Protocol for single-use challenge tokens (password reset, email verification)."""

from datetime import datetime
from typing import Protocol


class OneTimeTokenServiceProtocol(Protocol):
    """Generates unguessable tokens and their expiry instant.

    Implementations:
        - PasswordResetTokenService: 1 hour lifetime
        - EmailVerificationTokenService: 24 hour lifetime
    """

    def generate_token(self) -> str:
        """Generate a token.

        Returns:
            64-character hex string (32 bytes of entropy).
        """
        ...

    def calculate_expiration(self) -> datetime:
        """Expiration timestamp (UTC) for a token issued now."""
        ...
