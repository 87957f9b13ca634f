"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture. Infrastructure layer
implements this protocol.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from credential_service.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Email lookups are exact (case-sensitive). The store enforces email
    uniqueness. Token consumption is a single conditional update, so two
    concurrent consumers of the same token cannot both succeed.
    """

    async def create(self, user: User) -> UUID:
        """Persist a new user.

        Returns:
            The stored user's id.

        Raises:
            DuplicateEmailError: If the email is already stored.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by exact email address."""
        ...

    async def update_last_login(self, user_id: UUID) -> None:
        """Stamp last_login with the current time.

        Callers treat this as best-effort.
        """
        ...

    async def set_reset_token(
        self, email: str, token: str, expires_at: datetime
    ) -> bool:
        """Store a password reset token, replacing any outstanding one.

        Returns:
            False if no user has this email.
        """
        ...

    async def consume_reset_token(self, token: str, new_password_hash: str) -> bool:
        """Atomically redeem a reset token.

        Matches only when the token is stored and unexpired. On match the
        password hash is replaced and both reset fields are cleared.

        Returns:
            True if a user matched, False for unknown, superseded, consumed
            or expired tokens alike.
        """
        ...

    async def set_verify_token(
        self, user_id: UUID, token: str, expires_at: datetime
    ) -> bool:
        """Store an email verification token, replacing any outstanding one.

        Returns:
            False if the user does not exist.
        """
        ...

    async def consume_verify_token(self, token: str) -> bool:
        """Atomically redeem a verification token.

        On match sets email_verified and clears both verify fields.
        """
        ...
