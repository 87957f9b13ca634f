"""Registration handler.

Flow:
1. Validate email format and password strength
2. Hash password
3. Create User entity (unverified, active)
4. Insert; the store's unique index rejects duplicate emails
5. Return Success(user_id)

Uniqueness is not pre-checked with a lookup: the insert itself is the
check, so two concurrent registrations cannot both succeed.
"""

from uuid import UUID
from uuid_extensions import uuid7

from credential_service.application.commands.auth_commands import RegisterUser
from credential_service.application.commands.handlers._failures import (
    storage_failure,
    validation_failure,
)
from credential_service.core.enums import ErrorCode
from credential_service.core.errors import ConflictError, DomainError
from credential_service.core.result import Failure, Result, Success
from credential_service.domain.entities.user import User
from credential_service.domain.errors import (
    DuplicateEmailError,
    RegistrationError,
    StorageError,
)
from credential_service.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)
from credential_service.domain.validators import (
    validate_email,
    validate_strong_password,
)


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing service.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[UUID, DomainError]:
        """Handle user registration command.

        Returns:
            Success(user_id) on successful registration.
            Failure(ValidationError) for a bad email or weak password.
            Failure(ConflictError) if the email is already registered.
            Failure(DependencyError) if the store fails.
        """
        try:
            validate_email(cmd.email)
        except ValueError as e:
            return validation_failure(e, code=ErrorCode.INVALID_EMAIL, field="email")

        try:
            validate_strong_password(cmd.password)
        except ValueError as e:
            return validation_failure(
                e, code=ErrorCode.PASSWORD_TOO_WEAK, field="password"
            )

        user = User.register(
            id=uuid7(),
            email=cmd.email,
            password_hash=self._password_service.hash_password(cmd.password),
        )

        try:
            user_id = await self._user_repo.create(user)
        except DuplicateEmailError:
            self._logger.info("Registration rejected: email exists", email=cmd.email)
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message=RegistrationError.EMAIL_ALREADY_EXISTS,
                    resource_type="User",
                    conflicting_field="email",
                )
            )
        except StorageError as e:
            self._logger.error("Registration failed", error=e, email=cmd.email)
            return storage_failure()

        self._logger.info("User registered", user_id=str(user_id), email=cmd.email)
        return Success(value=user_id)
