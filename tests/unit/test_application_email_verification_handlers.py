"""Unit tests for the email verification handlers.

Tests cover:
- SendVerificationEmailHandler: success, unknown email, already verified,
  email and storage failures
- VerifyEmailHandler: success, token format, rejected token
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from credential_service.application.commands.auth_commands import (
    SendVerificationEmail,
    VerifyEmail,
)
from credential_service.application.commands.handlers import (
    SendVerificationEmailHandler,
    VerifyEmailHandler,
)
from credential_service.core.enums import ErrorCode
from credential_service.core.errors import (
    AuthenticationError,
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
)
from credential_service.core.result import Failure, Success
from credential_service.domain.entities.user import User
from credential_service.domain.errors import EmailDeliveryError, StorageError

VALID_TOKEN = "0f" * 32


@pytest.fixture
def mock_token_service():
    service = Mock()
    service.generate_token.return_value = VALID_TOKEN
    service.calculate_expiration.return_value = datetime.now(UTC) + timedelta(
        hours=24
    )
    return service


def create_user(*, verified: bool = False) -> User:
    user = User.register(
        id=uuid7(), email="user@example.com", password_hash="$2b$04$hash"
    )
    user.email_verified = verified
    return user


def create_handler(mock_repo, mock_token_service, mock_email_service):
    return SendVerificationEmailHandler(
        user_repo=mock_repo,
        token_service=mock_token_service,
        email_service=mock_email_service,
        logger=Mock(),
        web_app_url="https://app.example.com",
    )


@pytest.mark.unit
class TestSendVerificationEmailHandler:
    """Test SendVerificationEmailHandler."""

    @pytest.mark.asyncio
    async def test_unverified_user_gets_verification_link(self, mock_token_service):
        """Test token is stored by user id and emailed as a verify link."""
        # Arrange
        user = create_user()
        mock_repo = AsyncMock()
        mock_repo.find_by_email.return_value = user
        mock_repo.set_verify_token.return_value = True
        mock_email_service = AsyncMock()
        handler = create_handler(mock_repo, mock_token_service, mock_email_service)

        # Act
        result = await handler.handle(SendVerificationEmail(email="user@example.com"))

        # Assert
        assert isinstance(result, Success)
        mock_repo.set_verify_token.assert_awaited_once_with(
            user.id,
            VALID_TOKEN,
            mock_token_service.calculate_expiration.return_value,
        )
        mock_email_service.send_verification_email.assert_awaited_once_with(
            to_email="user@example.com",
            verification_url=f"https://app.example.com/verify-email?token={VALID_TOKEN}",
        )

    @pytest.mark.asyncio
    async def test_unknown_email_returns_not_found(self, mock_token_service):
        """Test unknown email is reported as 'user not found'."""
        # Arrange
        mock_repo = AsyncMock()
        mock_repo.find_by_email.return_value = None
        mock_email_service = AsyncMock()
        handler = create_handler(mock_repo, mock_token_service, mock_email_service)

        # Act
        result = await handler.handle(SendVerificationEmail(email="ghost@example.com"))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.message == "user not found"
        mock_email_service.send_verification_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_already_verified_returns_conflict(self, mock_token_service):
        """Test verified user is rejected without issuing a token."""
        # Arrange
        mock_repo = AsyncMock()
        mock_repo.find_by_email.return_value = create_user(verified=True)
        handler = create_handler(mock_repo, mock_token_service, AsyncMock())

        # Act
        result = await handler.handle(SendVerificationEmail(email="user@example.com"))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_VERIFIED
        assert result.error.message == "email already verified"
        mock_repo.set_verify_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_email_failure_returns_dependency_error(self, mock_token_service):
        """Test delivery failure maps to DependencyError."""
        # Arrange
        mock_repo = AsyncMock()
        mock_repo.find_by_email.return_value = create_user()
        mock_repo.set_verify_token.return_value = True
        mock_email_service = AsyncMock()
        mock_email_service.send_verification_email.side_effect = EmailDeliveryError(
            "ses rejected"
        )
        handler = create_handler(mock_repo, mock_token_service, mock_email_service)

        # Act
        result = await handler.handle(SendVerificationEmail(email="user@example.com"))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_DELIVERY_FAILED

    @pytest.mark.asyncio
    async def test_storage_failure_returns_dependency_error(self, mock_token_service):
        """Test token storage failure maps to DependencyError."""
        mock_repo = AsyncMock()
        mock_repo.find_by_email.return_value = create_user()
        mock_repo.set_verify_token.side_effect = StorageError("down")
        handler = create_handler(mock_repo, mock_token_service, AsyncMock())

        result = await handler.handle(SendVerificationEmail(email="user@example.com"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, DependencyError)
        assert result.error.code == ErrorCode.DATABASE_ERROR


@pytest.mark.unit
class TestVerifyEmailHandler:
    """Test VerifyEmailHandler."""

    @pytest.mark.asyncio
    async def test_valid_token_verifies_email(self):
        """Test redeemed token returns Success."""
        # Arrange
        mock_repo = AsyncMock()
        mock_repo.consume_verify_token.return_value = True
        handler = VerifyEmailHandler(user_repo=mock_repo, logger=Mock())

        # Act
        result = await handler.handle(VerifyEmail(token=VALID_TOKEN))

        # Assert
        assert isinstance(result, Success)
        mock_repo.consume_verify_token.assert_awaited_once_with(VALID_TOKEN)

    @pytest.mark.asyncio
    async def test_malformed_token_fails_validation(self):
        """Test malformed token never reaches the store."""
        # Arrange
        mock_repo = AsyncMock()
        handler = VerifyEmailHandler(user_repo=mock_repo, logger=Mock())

        # Act
        result = await handler.handle(VerifyEmail(token="short"))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.message == "invalid verification token"
        mock_repo.consume_verify_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_unmatched_token_fails_generically(self):
        """Test unknown, used or expired tokens share one error."""
        # Arrange
        mock_repo = AsyncMock()
        mock_repo.consume_verify_token.return_value = False
        handler = VerifyEmailHandler(user_repo=mock_repo, logger=Mock())

        # Act
        result = await handler.handle(VerifyEmail(token=VALID_TOKEN))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.message == "invalid or expired verification token"
