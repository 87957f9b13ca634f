"""Verify Email handler.

Validates the token format, then redeems the token in one conditional
update that sets email_verified and clears the verify fields.
"""

from credential_service.application.commands.auth_commands import VerifyEmail
from credential_service.application.commands.handlers._failures import (
    storage_failure,
    validation_failure,
)
from credential_service.core.enums import ErrorCode
from credential_service.core.errors import AuthenticationError, DomainError
from credential_service.core.result import Failure, Result, Success
from credential_service.domain.errors import EmailVerificationError, StorageError
from credential_service.domain.protocols import LoggerProtocol, UserRepository
from credential_service.domain.validators import validate_token_format


class VerifyEmailHandler:
    """Handler for verify email command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[None, DomainError]:
        try:
            validate_token_format(cmd.token, kind="verification token")
        except ValueError as e:
            return validation_failure(
                e, code=ErrorCode.INVALID_TOKEN_FORMAT, field="token"
            )

        try:
            redeemed = await self._user_repo.consume_verify_token(cmd.token)
        except StorageError as e:
            self._logger.error("Email verification failed", error=e, token=cmd.token)
            return storage_failure()

        if not redeemed:
            self._logger.info("Verification token rejected", token=cmd.token)
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message=EmailVerificationError.INVALID_OR_EXPIRED_TOKEN,
                )
            )

        self._logger.info("Email verified", token=cmd.token)
        return Success(value=None)
