"""Request Password Reset handler.

Flow:
1. Look up user by email
2. If user not found: return Success without sending anything
3. Generate token (1 hour lifetime) and store it on the user
4. Send reset email with {web_app_url}/reset-password?token=<token>
5. Return Success

Security:
- Unknown and known emails get the same response (no user enumeration)
- A new request overwrites any outstanding reset token
"""

from credential_service.application.commands.auth_commands import (
    RequestPasswordReset,
)
from credential_service.application.commands.handlers._failures import (
    email_failure,
    storage_failure,
)
from credential_service.core.errors import DomainError
from credential_service.core.result import Result, Success
from credential_service.domain.errors import EmailDeliveryError, StorageError
from credential_service.domain.protocols import (
    EmailProtocol,
    LoggerProtocol,
    OneTimeTokenServiceProtocol,
    UserRepository,
)


class RequestPasswordResetHandler:
    """Handler for request password reset command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: OneTimeTokenServiceProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        web_app_url: str,
    ) -> None:
        """Initialize password reset request handler with dependencies.

        Args:
            user_repo: User repository for lookup and token storage.
            token_service: Reset token generator (1 hour expiry).
            email_service: Email sending service.
            logger: Structured logger.
            web_app_url: Base URL of the page that accepts the reset token.
        """
        self._user_repo = user_repo
        self._token_service = token_service
        self._email_service = email_service
        self._logger = logger
        self._web_app_url = web_app_url

    async def handle(self, cmd: RequestPasswordReset) -> Result[None, DomainError]:
        """Handle password reset request command.

        Returns:
            Success(None) whether or not the account exists.
            Failure(DependencyError) if storage or email delivery fails.
        """
        try:
            user = await self._user_repo.find_by_email(cmd.email)
            if user is None:
                self._logger.info("Password reset for unknown email ignored")
                return Success(value=None)

            token = self._token_service.generate_token()
            expires_at = self._token_service.calculate_expiration()
            stored = await self._user_repo.set_reset_token(
                user.email, token, expires_at
            )
        except StorageError as e:
            self._logger.error("Password reset request failed", error=e)
            return storage_failure()

        if not stored:
            # Row vanished between lookup and update; same answer as unknown.
            return Success(value=None)

        reset_url = f"{self._web_app_url}/reset-password?token={token}"
        try:
            await self._email_service.send_password_reset_email(
                to_email=user.email,
                reset_url=reset_url,
            )
        except EmailDeliveryError as e:
            self._logger.error(
                "Password reset email failed", error=e, user_id=str(user.id)
            )
            return email_failure()

        self._logger.info(
            "Password reset requested", user_id=str(user.id), token=token
        )
        return Success(value=None)
