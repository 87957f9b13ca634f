"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture. Maps between domain User entities and
the UserModel table.

Token redemption is a single conditional UPDATE whose WHERE clause matches
the token and an unexpired expiry. The affected row count decides the
outcome, so two concurrent redemptions of one token cannot both succeed.

SQLAlchemy exceptions do not leave this module: a unique-email violation
becomes DuplicateEmailError and every other database failure becomes
StorageError, after the session is rolled back.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import Update, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from credential_service.domain.entities.user import User
from credential_service.domain.errors import DuplicateEmailError, StorageError
from credential_service.infrastructure.persistence.models.user import UserModel


def _as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on round trip)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from the protocol (structural typing).

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    @asynccontextmanager
    async def _storage_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError(f"{operation} failed") from e

    async def create(self, user: User) -> UUID:
        """Insert a new user.

        Args:
            user: Domain User entity to persist.

        Returns:
            The stored user's id.

        Raises:
            DuplicateEmailError: If the email is already registered.
            StorageError: On any other database failure.
        """
        user_model = self._to_model(user)
        async with self._storage_errors("create user"):
            self.session.add(user_model)
            try:
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise DuplicateEmailError(user.email) from e
        return user_model.id

    async def find_by_email(self, email: str) -> User | None:
        """Find user by exact email address (case-sensitive).

        Args:
            email: Email address as registered.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.email == email)
        async with self._storage_errors("find user by email"):
            result = await self.session.execute(stmt)
            user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def update_last_login(self, user_id: UUID) -> None:
        """Stamp last_login with the current time.

        Raises:
            StorageError: On database failure.
        """
        now = datetime.now(UTC)
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(last_login=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        await self._execute_update(stmt, "update last login")

    async def set_reset_token(
        self, email: str, token: str, expires_at: datetime
    ) -> bool:
        """Store a reset token and its expiry, replacing any outstanding one.

        Returns:
            True if a user with this email was updated, False otherwise.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.email == email)
            .values(
                reset_token=token,
                reset_token_expiry=expires_at,
                updated_at=datetime.now(UTC),
            )
            .execution_options(synchronize_session=False)
        )
        return await self._execute_update(stmt, "set reset token")

    async def consume_reset_token(self, token: str, new_password_hash: str) -> bool:
        """Redeem a reset token: replace the hash and clear both reset fields.

        Returns:
            True if an unexpired matching token was redeemed.
        """
        now = datetime.now(UTC)
        stmt = (
            update(UserModel)
            .where(
                UserModel.reset_token == token,
                UserModel.reset_token_expiry > now,
            )
            .values(
                password_hash=new_password_hash,
                reset_token=None,
                reset_token_expiry=None,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        return await self._execute_update(stmt, "consume reset token")

    async def set_verify_token(
        self, user_id: UUID, token: str, expires_at: datetime
    ) -> bool:
        """Store a verification token and its expiry, replacing any outstanding one."""
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                email_verify_token=token,
                email_verify_expiry=expires_at,
                updated_at=datetime.now(UTC),
            )
            .execution_options(synchronize_session=False)
        )
        return await self._execute_update(stmt, "set verify token")

    async def consume_verify_token(self, token: str) -> bool:
        """Redeem a verification token: mark verified and clear both verify fields."""
        now = datetime.now(UTC)
        stmt = (
            update(UserModel)
            .where(
                UserModel.email_verify_token == token,
                UserModel.email_verify_expiry > now,
            )
            .values(
                email_verified=True,
                email_verify_token=None,
                email_verify_expiry=None,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        return await self._execute_update(stmt, "consume verify token")

    async def _execute_update(self, stmt: Update, operation: str) -> bool:
        """Run an UPDATE, commit, and report whether exactly one row matched."""
        async with self._storage_errors(operation):
            result = await self.session.execute(stmt)
            await self.session.commit()
        return result.rowcount == 1  # type: ignore[attr-defined]

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            email=user_model.email,
            password_hash=user_model.password_hash,
            email_verified=user_model.email_verified,
            status=user_model.status,
            created_at=_as_utc(user_model.created_at),  # type: ignore[arg-type]
            updated_at=_as_utc(user_model.updated_at),  # type: ignore[arg-type]
            last_login=_as_utc(user_model.last_login),
            reset_token=user_model.reset_token,
            reset_token_expiry=_as_utc(user_model.reset_token_expiry),
            email_verify_token=user_model.email_verify_token,
            email_verify_expiry=_as_utc(user_model.email_verify_expiry),
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model."""
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            email_verified=user.email_verified,
            status=user.status,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login=user.last_login,
            reset_token=user.reset_token,
            reset_token_expiry=user.reset_token_expiry,
            email_verify_token=user.email_verify_token,
            email_verify_expiry=user.email_verify_expiry,
        )
