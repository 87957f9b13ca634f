"""User domain entity for credential management.

Pure business logic, no framework dependencies.

Pending challenges:
    - reset_token / reset_token_expiry: outstanding password reset
    - email_verify_token / email_verify_expiry: outstanding email verification

    Each token is always stored together with its expiry. Issuing a new
    challenge overwrites the previous one, so at most one of each kind is
    outstanding per user.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

USER_STATUS_ACTIVE = "active"


@dataclass
class User:
    """User domain entity.

    Attributes:
        id: Unique user identifier (UUIDv7), immutable.
        email: Email address exactly as registered (lookups are case-sensitive).
        password_hash: bcrypt hash (never plaintext, never serialized outward).
        email_verified: Whether the address has been confirmed.
        status: Lifecycle tag, "active" at creation.
        created_at: Timestamp when user was created.
        updated_at: Timestamp of the last mutation.
        last_login: Timestamp of the last successful login.
        reset_token: Outstanding password reset token.
        reset_token_expiry: Expiry of reset_token.
        email_verify_token: Outstanding email verification token.
        email_verify_expiry: Expiry of email_verify_token.

    Example:
        >>> user = User.register(
        ...     id=uuid7(),
        ...     email="user@example.com",
        ...     password_hash="$2b$12$...",
        ... )
        >>> user.email_verified
        False
    """

    id: UUID
    email: str
    password_hash: str
    email_verified: bool
    status: str
    created_at: datetime
    updated_at: datetime
    last_login: datetime | None = None

    reset_token: str | None = None
    reset_token_expiry: datetime | None = None
    email_verify_token: str | None = None
    email_verify_expiry: datetime | None = None

    @classmethod
    def register(cls, *, id: UUID, email: str, password_hash: str) -> "User":
        """Build a freshly registered, unverified, active user."""
        now = datetime.now(UTC)
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            email_verified=False,
            status=USER_STATUS_ACTIVE,
            created_at=now,
            updated_at=now,
        )
