"""AWS SES email service.

boto3 calls are blocking, so send_email runs in a worker thread.
"""

import asyncio
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from credential_service.domain.errors import EmailDeliveryError
from credential_service.domain.protocols.logger_protocol import LoggerProtocol
from credential_service.domain.value_objects import EmailMessage
from credential_service.infrastructure.email.base import BaseEmailService


class SESEmailService(BaseEmailService):
    """Email delivery through AWS SES.

    Credentials come from the standard boto3 chain (environment, profile,
    instance role).

    Args:
        from_address: Verified SES sender address.
        region: AWS region of the SES endpoint.
        logger: Structured logger.
        client: Pre-built SES client (tests inject a stub).
    """

    def __init__(
        self,
        *,
        from_address: str,
        region: str,
        logger: LoggerProtocol,
        client: Any | None = None,
    ) -> None:
        super().__init__(from_address=from_address)
        self._client = client or boto3.client("ses", region_name=region)
        self._logger = logger

    async def send(self, message: EmailMessage) -> None:
        """Send one message via SES.

        Raises:
            EmailDeliveryError: If SES rejects the call or boto3 fails.
        """
        try:
            response = await asyncio.to_thread(
                self._client.send_email,
                Source=message.from_address,
                Destination={"ToAddresses": [message.to_address]},
                Message={
                    "Subject": {"Charset": "UTF-8", "Data": message.subject},
                    "Body": {"Html": {"Charset": "UTF-8", "Data": message.html_body}},
                },
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            self._logger.error(
                "SES delivery failed",
                error=e,
                to_address=message.to_address,
                ses_error_code=error_code,
            )
            raise EmailDeliveryError(
                f"SES rejected message: {error_code}", to_address=message.to_address
            ) from e
        except BotoCoreError as e:
            self._logger.error(
                "SES delivery failed", error=e, to_address=message.to_address
            )
            raise EmailDeliveryError(
                "SES delivery failed", to_address=message.to_address
            ) from e

        self._logger.info(
            "Email sent",
            to_address=message.to_address,
            subject=message.subject,
            backend="ses",
            message_id=response.get("MessageId", "unknown"),
        )
