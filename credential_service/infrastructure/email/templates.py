"""HTML templates for account emails.

The link validity stated in each body matches the token lifetime used by
the corresponding token service.
"""

from html import escape

from credential_service.core.constants import (
    EMAIL_VERIFICATION_TOKEN_TTL_HOURS,
    PASSWORD_RESET_TOKEN_TTL_HOURS,
)
from credential_service.domain.value_objects import EmailMessage

PASSWORD_RESET_SUBJECT = "Reset your password"
VERIFICATION_SUBJECT = "Verify your email address"


def _hours(n: int) -> str:
    return "1 hour" if n == 1 else f"{n} hours"


def build_password_reset_message(
    *, from_address: str, to_address: str, reset_url: str
) -> EmailMessage:
    """Build the password reset email."""
    link = escape(reset_url, quote=True)
    body = (
        "<h2>Reset your password</h2>\n"
        "<p>Click the link below to choose a new password:</p>\n"
        f'<p><a href="{link}">Reset password</a></p>\n'
        f"<p>This link is valid for {_hours(PASSWORD_RESET_TOKEN_TTL_HOURS)}.</p>\n"
        "<p>If you did not request a password reset, you can ignore this email.</p>\n"
    )
    return EmailMessage(
        from_address=from_address,
        to_address=to_address,
        subject=PASSWORD_RESET_SUBJECT,
        html_body=body,
    )


def build_verification_message(
    *, from_address: str, to_address: str, verification_url: str
) -> EmailMessage:
    """Build the email verification email."""
    link = escape(verification_url, quote=True)
    body = (
        "<h2>Verify your email address</h2>\n"
        "<p>Click the link below to verify your email address:</p>\n"
        f'<p><a href="{link}">Verify email</a></p>\n'
        f"<p>This link is valid for {_hours(EMAIL_VERIFICATION_TOKEN_TTL_HOURS)}.</p>\n"
    )
    return EmailMessage(
        from_address=from_address,
        to_address=to_address,
        subject=VERIFICATION_SUBJECT,
        html_body=body,
    )
