"""Database models."""

from credential_service.infrastructure.persistence.models.user import UserModel

__all__ = ["UserModel"]
