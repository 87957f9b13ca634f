"""EmailProtocol - Port for email service implementations.

Infrastructure provides StubEmailService, SMTPEmailService and
SESEmailService.
"""

from typing import Protocol


class EmailProtocol(Protocol):
    """Email service protocol (port).

    Implementations raise EmailDeliveryError when the transport fails.

    Example:
        >>> await email_service.send_password_reset_email(
        ...     to_email="user@example.com",
        ...     reset_url="https://app.example.com/reset-password?token=abc123",
        ... )
    """

    async def send_verification_email(
        self,
        to_email: str,
        verification_url: str,
    ) -> None:
        """Send email verification link to user.

        Args:
            to_email: Recipient email address.
            verification_url: Full URL with verification token.
        """
        ...

    async def send_password_reset_email(
        self,
        to_email: str,
        reset_url: str,
    ) -> None:
        """Send password reset link to user.

        Args:
            to_email: Recipient email address.
            reset_url: Full URL with password reset token.
        """
        ...
