"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; they do not inherit
from them.
"""

from credential_service.domain.protocols.email_protocol import EmailProtocol
from credential_service.domain.protocols.logger_protocol import LoggerProtocol
from credential_service.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from credential_service.domain.protocols.session_token_protocol import (
    SessionClaims,
    SessionTokenProtocol,
)
from credential_service.domain.protocols.token_service_protocol import (
    OneTimeTokenServiceProtocol,
)
from credential_service.domain.protocols.user_repository import UserRepository

__all__ = [
    "EmailProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "SessionClaims",
    "SessionTokenProtocol",
    "OneTimeTokenServiceProtocol",
    "UserRepository",
]
