"""Confirm Password Reset handler.

Flow:
1. Validate token format and new password strength
2. Hash new password
3. Redeem token atomically (match token and unexpired expiry, set hash,
   clear reset fields)
4. Return Success, or one generic error for unknown, superseded, used or
   expired tokens
"""

from credential_service.application.commands.auth_commands import (
    ConfirmPasswordReset,
)
from credential_service.application.commands.handlers._failures import (
    storage_failure,
    validation_failure,
)
from credential_service.core.enums import ErrorCode
from credential_service.core.errors import AuthenticationError, DomainError
from credential_service.core.result import Failure, Result, Success
from credential_service.domain.errors import PasswordResetError, StorageError
from credential_service.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)
from credential_service.domain.validators import (
    validate_strong_password,
    validate_token_format,
)


class ConfirmPasswordResetHandler:
    """Handler for confirm password reset command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: ConfirmPasswordReset) -> Result[None, DomainError]:
        """Handle confirm password reset command.

        Returns:
            Success(None) once the password is replaced.
            Failure(ValidationError) for a malformed token or weak password.
            Failure(AuthenticationError) if no unexpired token matched.
            Failure(DependencyError) if the store fails.
        """
        try:
            validate_token_format(cmd.token, kind="reset token")
        except ValueError as e:
            return validation_failure(
                e, code=ErrorCode.INVALID_TOKEN_FORMAT, field="token"
            )

        try:
            validate_strong_password(cmd.new_password)
        except ValueError as e:
            return validation_failure(
                e, code=ErrorCode.PASSWORD_TOO_WEAK, field="new_password"
            )

        new_hash = self._password_service.hash_password(cmd.new_password)

        try:
            redeemed = await self._user_repo.consume_reset_token(cmd.token, new_hash)
        except StorageError as e:
            self._logger.error("Password reset failed", error=e, token=cmd.token)
            return storage_failure()

        if not redeemed:
            self._logger.info("Password reset token rejected", token=cmd.token)
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message=PasswordResetError.INVALID_OR_EXPIRED_TOKEN,
                )
            )

        self._logger.info("Password reset completed", token=cmd.token)
        return Success(value=None)
