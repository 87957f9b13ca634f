"""Account commands (CQRS write operations).

Commands represent user intent to change system state. They are immutable
data containers carrying raw client input; handlers validate it so that
each rule can report its own message.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    Attributes:
        email: Email address (validated by the handler, stored as given).
        password: Plaintext password (strength checked, then hashed).

    Example:
        >>> command = RegisterUser(email="user@example.com", password="Valid1Pass!")
        >>> result = await handler.handle(command)
    """

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange email and password for a session token."""

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Email a password reset link if the account exists.

    Attributes:
        email: Address to look up. Unknown addresses still succeed.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Redeem a reset token and set a new password.

    Attributes:
        token: Token from the reset link.
        new_password: New plaintext password (strength checked).
    """

    token: str
    new_password: str


@dataclass(frozen=True, kw_only=True)
class SendVerificationEmail:
    """Email a verification link to an unverified account."""

    email: str


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Redeem an email verification token."""

    token: str
