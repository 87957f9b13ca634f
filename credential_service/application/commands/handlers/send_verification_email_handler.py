"""Send Verification Email handler.

Flow:
1. Look up user by email (unknown email is reported as not found)
2. Reject if already verified
3. Generate token (24 hour lifetime) and store it on the user
4. Send verification email with {web_app_url}/verify-email?token=<token>

Unlike password reset, this flow tells the caller whether the account
exists and whether it is already verified.
"""

from credential_service.application.commands.auth_commands import (
    SendVerificationEmail,
)
from credential_service.application.commands.handlers._failures import (
    email_failure,
    storage_failure,
)
from credential_service.core.enums import ErrorCode
from credential_service.core.errors import ConflictError, DomainError, NotFoundError
from credential_service.core.result import Failure, Result, Success
from credential_service.domain.errors import (
    EmailDeliveryError,
    EmailVerificationError,
    StorageError,
)
from credential_service.domain.protocols import (
    EmailProtocol,
    LoggerProtocol,
    OneTimeTokenServiceProtocol,
    UserRepository,
)


class SendVerificationEmailHandler:
    """Handler for send verification email command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: OneTimeTokenServiceProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        web_app_url: str,
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service
        self._email_service = email_service
        self._logger = logger
        self._web_app_url = web_app_url

    def _not_found(self, email: str) -> Failure[NotFoundError]:
        return Failure(
            error=NotFoundError(
                code=ErrorCode.USER_NOT_FOUND,
                message=EmailVerificationError.USER_NOT_FOUND,
                resource_type="User",
                resource_id=email,
            )
        )

    async def handle(self, cmd: SendVerificationEmail) -> Result[None, DomainError]:
        """Handle send verification email command.

        Returns:
            Success(None) once the email is sent.
            Failure(NotFoundError) for an unknown email.
            Failure(ConflictError) if the email is already verified.
            Failure(DependencyError) if storage or email delivery fails.
        """
        try:
            user = await self._user_repo.find_by_email(cmd.email)
            if user is None:
                return self._not_found(cmd.email)

            if user.email_verified:
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.EMAIL_ALREADY_VERIFIED,
                        message=EmailVerificationError.ALREADY_VERIFIED,
                        resource_type="User",
                        conflicting_field="email_verified",
                    )
                )

            token = self._token_service.generate_token()
            expires_at = self._token_service.calculate_expiration()
            stored = await self._user_repo.set_verify_token(user.id, token, expires_at)
        except StorageError as e:
            self._logger.error("Verification email request failed", error=e)
            return storage_failure()

        if not stored:
            return self._not_found(cmd.email)

        verification_url = f"{self._web_app_url}/verify-email?token={token}"
        try:
            await self._email_service.send_verification_email(
                to_email=user.email,
                verification_url=verification_url,
            )
        except EmailDeliveryError as e:
            self._logger.error(
                "Verification email failed", error=e, user_id=str(user.id)
            )
            return email_failure()

        self._logger.info("Verification email sent", user_id=str(user.id), token=token)
        return Success(value=None)
