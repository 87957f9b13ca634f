"""Domain entities."""

from credential_service.domain.entities.user import USER_STATUS_ACTIVE, User

__all__ = ["User", "USER_STATUS_ACTIVE"]
