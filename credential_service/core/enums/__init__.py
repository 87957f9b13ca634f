"""Core enums package.

Usage:
    from credential_service.core.enums import ErrorCode, Environment
"""

from credential_service.core.enums.email_backend import EmailBackend
from credential_service.core.enums.environment import Environment
from credential_service.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment", "EmailBackend"]
