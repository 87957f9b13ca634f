"""Email service implementations.

- StubEmailService: logs messages instead of sending (development/testing)
- SMTPEmailService: stdlib smtplib transport
- SESEmailService: AWS SES via boto3
"""

from credential_service.infrastructure.email.base import BaseEmailService
from credential_service.infrastructure.email.ses_email_service import SESEmailService
from credential_service.infrastructure.email.smtp_email_service import SMTPEmailService
from credential_service.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "BaseEmailService",
    "SESEmailService",
    "SMTPEmailService",
    "StubEmailService",
]
