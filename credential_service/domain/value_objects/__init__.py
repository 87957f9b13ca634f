"""Domain value objects."""

from credential_service.domain.value_objects.email_message import EmailMessage

__all__ = ["EmailMessage"]
