"""Unit tests for random token generation and one-time token services."""

import re
from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time

from credential_service.infrastructure.security import (
    EmailVerificationTokenService,
    PasswordResetTokenService,
)
from credential_service.infrastructure.security.token_generator import (
    generate_random_token,
)

HEX_64 = re.compile(r"^[0-9a-f]{64}$")


@pytest.mark.unit
class TestGenerateRandomToken:
    """Test generate_random_token."""

    def test_returns_lowercase_hex_of_double_length(self):
        """Test output is 2 * byte_length lowercase hex characters."""
        token = generate_random_token(32)

        assert HEX_64.match(token)

    def test_tokens_are_unique(self):
        """Test repeated calls never collide."""
        tokens = {generate_random_token(32) for _ in range(100)}

        assert len(tokens) == 100

    @pytest.mark.parametrize("byte_length", [0, -1])
    def test_rejects_non_positive_length(self, byte_length):
        """Test zero or negative byte counts are rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            generate_random_token(byte_length)


@pytest.mark.unit
class TestOneTimeTokenServices:
    """Test PasswordResetTokenService and EmailVerificationTokenService."""

    @pytest.mark.parametrize(
        "service_cls", [PasswordResetTokenService, EmailVerificationTokenService]
    )
    def test_generate_token_is_64_hex(self, service_cls):
        """Test both services issue 32-byte hex tokens."""
        assert HEX_64.match(service_cls().generate_token())

    @freeze_time("2026-01-15 12:00:00")
    def test_reset_token_expires_in_one_hour(self):
        """Test password reset tokens live one hour."""
        expires_at = PasswordResetTokenService().calculate_expiration()

        assert expires_at == datetime(2026, 1, 15, 13, 0, tzinfo=UTC)

    @freeze_time("2026-01-15 12:00:00")
    def test_verification_token_expires_in_24_hours(self):
        """Test verification tokens live 24 hours."""
        expires_at = EmailVerificationTokenService().calculate_expiration()

        assert expires_at == datetime(2026, 1, 16, 12, 0, tzinfo=UTC)

    @freeze_time("2026-01-15 12:00:00")
    def test_custom_expiration_hours(self):
        """Test lifetime is configurable."""
        expires_at = PasswordResetTokenService(expiration_hours=2).calculate_expiration()

        assert expires_at - datetime.now(UTC) == timedelta(hours=2)
