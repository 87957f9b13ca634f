"""Outbound email transport selection."""

from enum import Enum


class EmailBackend(str, Enum):
    """Which adapter the container builds for outbound email.

    STUB logs messages instead of sending them (development and tests).
    """

    STUB = "stub"
    SMTP = "smtp"
    SES = "ses"
