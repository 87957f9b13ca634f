"""User database model.

One row per registered email. Pending password reset and email
verification challenges live on the row itself as token/expiry column
pairs; the repository always writes and clears each pair together.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from credential_service.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """User model for credentials and challenge tokens.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        email: Unique email address (stored as submitted, case-sensitive)
        password_hash: Bcrypt hashed password (NEVER plaintext)
        email_verified: Email verification status
        status: Lifecycle tag ("active")
        last_login: Last successful login
        reset_token / reset_token_expiry: Outstanding password reset
        email_verify_token / email_verify_expiry: Outstanding verification

    Indexes:
        - email (unique): login and lookup queries
        - reset_token, email_verify_token: token redemption
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    email_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="active",
    )

    last_login: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    reset_token: Mapped[str | None] = mapped_column(
        String(128),
        nullable=True,
        index=True,
        default=None,
    )
    reset_token_expiry: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    email_verify_token: Mapped[str | None] = mapped_column(
        String(128),
        nullable=True,
        index=True,
        default=None,
    )
    email_verify_expiry: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )
