"""JWT session token service (adapter).

Implements SessionTokenProtocol using PyJWT with HMAC-SHA256.

Claims:
    - sub: user id
    - email: email at issuance
    - iat / nbf: issuance instant
    - exp: iat + expiration_hours
    - jti: unique token id (UUIDv7)

Only HS256 is accepted on decode, so unsigned ("none") and asymmetric
tokens are rejected. Validation is stateless (no database lookup).
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID
from uuid_extensions import uuid7

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from credential_service.core.constants import JWT_SECRET_MIN_LENGTH, SECONDS_PER_HOUR
from credential_service.core.result import Failure, Result, Success
from credential_service.domain.errors import SessionTokenError
from credential_service.domain.protocols.session_token_protocol import SessionClaims

_REQUIRED_CLAIMS = ["sub", "email", "iat", "nbf", "exp", "jti"]


class JWTService:
    """JWT session token generation and validation service.

    Usage:
        from credential_service.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_session_token(user_id=user.id, email=user.email)
        result = token_service.validate_session_token(token)
    """

    def __init__(self, secret_key: str, expiration_hours: int = 24) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing (at least 32 chars).
            expiration_hours: Token lifetime in hours (default: 24).

        Raises:
            ValueError: If secret_key is too short or expiration is not positive.
        """
        if len(secret_key) < JWT_SECRET_MIN_LENGTH:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if expiration_hours <= 0:
            msg = "JWT expiration must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_hours = expiration_hours
        self._algorithm = "HS256"

    @property
    def expires_in_seconds(self) -> int:
        return self._expiration_hours * SECONDS_PER_HOUR

    def generate_session_token(self, user_id: UUID, email: str) -> str:
        """Generate a signed session token.

        Args:
            user_id: User's unique identifier (stored in 'sub').
            email: User's email address.

        Returns:
            JWT string (header.payload.signature).
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(hours=self._expiration_hours)
        issued_at = int(now.timestamp())

        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "nbf": issued_at,
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_session_token(self, token: str) -> Result[SessionClaims, str]:
        """Validate a session token and extract its claims.

        PyJWT checks the signature, exp and nbf; all claims in
        _REQUIRED_CLAIMS must be present.

        Args:
            token: JWT string to validate.

        Returns:
            Success(SessionClaims) if valid, Failure(SessionTokenError.EXPIRED_TOKEN)
            for expired tokens, Failure(SessionTokenError.INVALID_TOKEN) otherwise.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(error=SessionTokenError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=SessionTokenError.INVALID_TOKEN)

        try:
            claims = SessionClaims(
                user_id=UUID(str(payload["sub"])),
                email=str(payload["email"]),
                issued_at=datetime.fromtimestamp(int(payload["iat"]), UTC),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), UTC),
                token_id=str(payload["jti"]),
            )
        except (TypeError, ValueError):
            # Signed by us but not in the shape we issue
            return Failure(error=SessionTokenError.INVALID_TOKEN)

        return Success(value=claims)
