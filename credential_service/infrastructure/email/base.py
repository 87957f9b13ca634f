"""Shared template plumbing for email adapters.

Subclasses implement `send(message)`; the account-specific methods of
EmailProtocol are built on top of it here.
"""

from abc import ABC, abstractmethod

from credential_service.domain.value_objects import EmailMessage
from credential_service.infrastructure.email.templates import (
    build_password_reset_message,
    build_verification_message,
)


class BaseEmailService(ABC):
    """Renders account emails and hands them to a transport.

    Args:
        from_address: Sender address placed in the From header.
    """

    def __init__(self, *, from_address: str) -> None:
        self._from_address = from_address

    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        """Deliver one message.

        Raises:
            EmailDeliveryError: If the transport fails.
        """

    async def send_verification_email(
        self,
        to_email: str,
        verification_url: str,
    ) -> None:
        await self.send(
            build_verification_message(
                from_address=self._from_address,
                to_address=to_email,
                verification_url=verification_url,
            )
        )

    async def send_password_reset_email(
        self,
        to_email: str,
        reset_url: str,
    ) -> None:
        await self.send(
            build_password_reset_message(
                from_address=self._from_address,
                to_address=to_email,
                reset_url=reset_url,
            )
        )
