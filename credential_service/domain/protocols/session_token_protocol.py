"""Session token protocol.

A session token is a signed, time-bounded bearer credential issued at
login. Validation is stateless: there is no revocation list.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from credential_service.core.result import Result


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionClaims:
    """Verified claims of a session token.

    Attributes:
        user_id: Subject (sub claim).
        email: Email at issuance time.
        issued_at: iat claim.
        expires_at: exp claim.
        token_id: jti claim.
    """

    user_id: UUID
    email: str
    issued_at: datetime
    expires_at: datetime
    token_id: str


class SessionTokenProtocol(Protocol):
    """Session token issuing and verification interface.

    Usage:
        token = token_service.generate_session_token(user_id=user.id, email=user.email)

        match token_service.validate_session_token(token):
            case Success(value=claims):
                user_id = claims.user_id
            case Failure(error=error):
                # Invalid or expired token
                pass
    """

    @property
    def expires_in_seconds(self) -> int:
        """Lifetime of newly issued tokens in seconds."""
        ...

    def generate_session_token(self, user_id: UUID, email: str) -> str:
        """Issue a signed session token for the user."""
        ...

    def validate_session_token(self, token: str) -> Result[SessionClaims, str]:
        """Verify signature and time bounds.

        Returns:
            Success(SessionClaims) or Failure(error message).
        """
        ...
