"""Integration tests for the JWT session token service.

Tests use the real PyJWT library: issue, validate, and reject tokens that
are expired, not yet valid, tampered with, unsigned, or missing claims.
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from credential_service.core.result import Failure, Success
from credential_service.infrastructure.security import JWTService

SECRET = "integration-test-secret-key-long-enough-for-hs256-and-hs512-signing"
OTHER_SECRET = "another-secret-key-that-is-also-long-enough-for-every-hmac-variant"


def encode_claims(claims: dict, secret: str = SECRET, algorithm: str = "HS256") -> str:
    return jwt.encode(claims, secret, algorithm=algorithm)


def full_claims(**overrides) -> dict:
    now = int(datetime.now(UTC).timestamp())
    claims = {
        "sub": str(uuid7()),
        "email": "user@example.com",
        "iat": now,
        "nbf": now,
        "exp": now + 3600,
        "jti": str(uuid7()),
    }
    claims.update(overrides)
    return claims


@pytest.mark.integration
class TestJWTServiceIntegration:
    """Integration tests for JWTService."""

    def test_rejects_short_secret(self):
        """Test secrets under 32 characters are refused."""
        with pytest.raises(ValueError, match="at least 32"):
            JWTService(secret_key="short")

    def test_rejects_non_positive_expiration(self):
        """Test zero lifetime is refused."""
        with pytest.raises(ValueError, match="positive"):
            JWTService(secret_key=SECRET, expiration_hours=0)

    def test_expires_in_seconds(self):
        """Test lifetime is reported in seconds."""
        assert JWTService(secret_key=SECRET, expiration_hours=24).expires_in_seconds == 86400

    def test_generate_and_validate_round_trip(self):
        """Test an issued token validates and exposes its claims."""
        # Arrange
        service = JWTService(secret_key=SECRET)
        user_id = uuid7()

        # Act
        token = service.generate_session_token(user_id=user_id, email="user@example.com")
        result = service.validate_session_token(token)

        # Assert
        assert isinstance(result, Success)
        claims = result.value
        assert claims.user_id == user_id
        assert claims.email == "user@example.com"
        assert claims.expires_at - claims.issued_at == timedelta(hours=24)
        assert claims.token_id

    def test_tokens_have_unique_jti(self):
        """Test two tokens for the same user differ by jti."""
        service = JWTService(secret_key=SECRET)
        user_id = uuid7()

        token1 = service.generate_session_token(user_id=user_id, email="a@example.com")
        token2 = service.generate_session_token(user_id=user_id, email="a@example.com")

        jti1 = jwt.decode(token1, SECRET, algorithms=["HS256"])["jti"]
        jti2 = jwt.decode(token2, SECRET, algorithms=["HS256"])["jti"]
        assert jti1 != jti2

    def test_expired_token_rejected(self):
        """Test a token is refused after its exp."""
        # Arrange
        service = JWTService(secret_key=SECRET, expiration_hours=1)
        with freeze_time("2026-01-15 12:00:00"):
            token = service.generate_session_token(
                user_id=uuid7(), email="user@example.com"
            )

        # Act
        with freeze_time("2026-01-15 13:00:01"):
            result = service.validate_session_token(token)

        # Assert
        assert isinstance(result, Failure)
        assert result.error == "Token expired"

    def test_not_yet_valid_token_rejected(self):
        """Test a token whose nbf lies in the future is refused."""
        service = JWTService(secret_key=SECRET)
        future = int(datetime.now(UTC).timestamp()) + 600
        token = encode_claims(full_claims(nbf=future, iat=future))

        result = service.validate_session_token(token)

        assert isinstance(result, Failure)
        assert result.error == "Invalid token"

    def test_wrong_signature_rejected(self):
        """Test a token signed with another key is refused."""
        service = JWTService(secret_key=SECRET)
        token = encode_claims(full_claims(), secret=OTHER_SECRET)

        result = service.validate_session_token(token)

        assert isinstance(result, Failure)
        assert result.error == "Invalid token"

    def test_unsigned_token_rejected(self):
        """Test alg=none tokens are refused."""
        service = JWTService(secret_key=SECRET)
        token = jwt.encode(full_claims(), None, algorithm="none")

        result = service.validate_session_token(token)

        assert isinstance(result, Failure)
        assert result.error == "Invalid token"

    def test_other_hmac_algorithm_rejected(self):
        """Test only HS256 is accepted."""
        service = JWTService(secret_key=SECRET)
        token = encode_claims(full_claims(), algorithm="HS512")

        result = service.validate_session_token(token)

        assert isinstance(result, Failure)
        assert result.error == "Invalid token"

    @pytest.mark.parametrize("missing", ["sub", "email", "iat", "nbf", "exp", "jti"])
    def test_missing_claim_rejected(self, missing):
        """Test every issued claim is required."""
        service = JWTService(secret_key=SECRET)
        claims = full_claims()
        del claims[missing]

        result = service.validate_session_token(encode_claims(claims))

        assert isinstance(result, Failure)
        assert result.error == "Invalid token"

    def test_non_uuid_subject_rejected(self):
        """Test a validly signed token with a malformed sub is refused."""
        service = JWTService(secret_key=SECRET)

        result = service.validate_session_token(
            encode_claims(full_claims(sub="not-a-uuid"))
        )

        assert isinstance(result, Failure)
        assert result.error == "Invalid token"

    def test_garbage_rejected(self):
        """Test non-JWT input is refused."""
        service = JWTService(secret_key=SECRET)

        result = service.validate_session_token("not.a.jwt")

        assert isinstance(result, Failure)
        assert result.error == "Invalid token"
