"""Stub email service (development/testing).

Logs each message instead of delivering it. Only wired up when
EMAIL_BACKEND=stub; the log line carries the full link so a developer can
follow it locally.
"""

import re

from credential_service.domain.protocols.logger_protocol import LoggerProtocol
from credential_service.domain.value_objects import EmailMessage
from credential_service.infrastructure.email.base import BaseEmailService

_HREF_PATTERN = re.compile(r'href="([^"]+)"')


class StubEmailService(BaseEmailService):
    """Email service that writes messages to the logger.

    Args:
        logger: Structured logger.
        from_address: Sender address.
    """

    def __init__(self, *, logger: LoggerProtocol, from_address: str) -> None:
        super().__init__(from_address=from_address)
        self._logger = logger

    async def send(self, message: EmailMessage) -> None:
        link = _HREF_PATTERN.search(message.html_body)
        self._logger.info(
            "Email not sent (stub backend)",
            to_address=message.to_address,
            subject=message.subject,
            link=link.group(1) if link else None,
        )
