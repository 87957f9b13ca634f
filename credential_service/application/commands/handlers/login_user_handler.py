"""Login handler.

Flow:
1. Look up user by email
2. Verify password (unknown email and wrong password fail identically)
3. Record last_login (best-effort: failure is logged, login continues)
4. Issue session token
5. Return Success(LoginResult)
"""

from dataclasses import dataclass

from credential_service.application.commands.auth_commands import LoginUser
from credential_service.application.commands.handlers._failures import (
    storage_failure,
)
from credential_service.core.enums import ErrorCode
from credential_service.core.errors import AuthenticationError, DomainError
from credential_service.core.result import Failure, Result, Success
from credential_service.domain.errors import LoginError, StorageError
from credential_service.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    SessionTokenProtocol,
    UserRepository,
)


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Session token issued at login.

    Attributes:
        token: Signed session token.
        expires_in: Token lifetime in seconds.
    """

    token: str
    expires_in: int


class LoginUserHandler:
    """Handler for login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: SessionTokenProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[LoginResult, DomainError]:
        """Handle login command.

        Returns:
            Success(LoginResult) on valid credentials.
            Failure(AuthenticationError) for unknown email or wrong password.
            Failure(DependencyError) if the user lookup fails.
        """
        try:
            user = await self._user_repo.find_by_email(cmd.email)
        except StorageError as e:
            self._logger.error("Login lookup failed", error=e, email=cmd.email)
            return storage_failure()

        if user is None or not self._password_service.verify_password(
            cmd.password, user.password_hash
        ):
            self._logger.info("Login rejected", email=cmd.email)
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=LoginError.INVALID_CREDENTIALS,
                )
            )

        try:
            await self._user_repo.update_last_login(user.id)
        except StorageError as e:
            # Best-effort: the credentials were valid, so the login stands.
            self._logger.warning(
                "Failed to update last login",
                user_id=str(user.id),
                error_type=type(e).__name__,
                error_message=str(e),
            )

        token = self._token_service.generate_session_token(
            user_id=user.id, email=user.email
        )
        self._logger.info("User logged in", user_id=str(user.id))
        return Success(
            value=LoginResult(
                token=token, expires_in=self._token_service.expires_in_seconds
            )
        )
