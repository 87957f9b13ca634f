"""SMTP email service.

Uses the stdlib smtplib client. The client is blocking, so each delivery
runs in a worker thread via asyncio.to_thread. A new connection is opened
per message.
"""

import asyncio
import smtplib
from email.mime.text import MIMEText

from credential_service.domain.errors import EmailDeliveryError
from credential_service.domain.protocols.logger_protocol import LoggerProtocol
from credential_service.domain.value_objects import EmailMessage
from credential_service.infrastructure.email.base import BaseEmailService

_PASSTHROUGH_HEADERS = ("From", "To", "Subject")


class SMTPEmailService(BaseEmailService):
    """Email delivery over SMTP (optional STARTTLS and login).

    Args:
        host: SMTP server host.
        port: SMTP server port.
        from_address: Sender address.
        logger: Structured logger.
        username: Login user; login is skipped when None.
        password: Login password.
        use_tls: Upgrade the connection with STARTTLS.
        timeout: Socket timeout in seconds.
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        from_address: str,
        logger: LoggerProtocol,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        super().__init__(from_address=from_address)
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout = timeout
        self._logger = logger

    @staticmethod
    def to_mime(message: EmailMessage) -> MIMEText:
        """Render the message as a MIME document.

        MIMEText supplies MIME-Version and Content-Type (text/html, UTF-8);
        the remaining headers are copied in EmailMessage order.
        """
        mime = MIMEText(message.html_body, "html", "utf-8")
        for name, value in message.headers():
            if name in _PASSTHROUGH_HEADERS:
                mime[name] = value
        return mime

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
            if self._use_tls:
                smtp.starttls()
            if self._username:
                smtp.login(self._username, self._password or "")
            smtp.sendmail(
                message.from_address,
                [message.to_address],
                self.to_mime(message).as_string(),
            )

    async def send(self, message: EmailMessage) -> None:
        """Send one message.

        Raises:
            EmailDeliveryError: On any SMTP or socket failure.
        """
        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            self._logger.error(
                "SMTP delivery failed",
                error=e,
                to_address=message.to_address,
                smtp_host=self._host,
            )
            raise EmailDeliveryError(
                "SMTP delivery failed", to_address=message.to_address
            ) from e

        self._logger.info(
            "Email sent",
            to_address=message.to_address,
            subject=message.subject,
            backend="smtp",
        )
