"""Unit tests for the User domain entity."""

from datetime import UTC

import pytest
from uuid_extensions import uuid7

from credential_service.domain.entities.user import USER_STATUS_ACTIVE, User


def create_user() -> User:
    return User.register(id=uuid7(), email="user@example.com", password_hash="$2b$04$x")


@pytest.mark.unit
class TestUserEntity:
    """Test User registration defaults."""

    def test_register_defaults(self):
        """Test a new user is unverified, active and has no challenges."""
        user = create_user()

        assert user.email_verified is False
        assert user.status == USER_STATUS_ACTIVE
        assert user.created_at == user.updated_at
        assert user.created_at.tzinfo is UTC
        assert user.last_login is None
        assert user.reset_token is None
        assert user.reset_token_expiry is None
        assert user.email_verify_token is None
        assert user.email_verify_expiry is None

    def test_register_keeps_email_as_submitted(self):
        """Test registration does not normalize the email address."""
        user = User.register(id=uuid7(), email="User@Example.COM", password_hash="$2b$04$x")

        assert user.email == "User@Example.COM"
