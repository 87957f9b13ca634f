"""Infrastructure dependency factories.

Application-scoped singletons built from Settings:
- Database (SQLAlchemy async engine)
- Password hashing (bcrypt)
- Session tokens (JWT)
- One-time tokens (password reset, email verification)
- Email (stub/SMTP/SES)
- Logging (structlog console)

Plus the request-scoped database session.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from credential_service.core.config import get_settings
from credential_service.core.enums import EmailBackend
from credential_service.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from credential_service.domain.protocols import (
        EmailProtocol,
        LoggerProtocol,
        OneTimeTokenServiceProtocol,
        PasswordHashingProtocol,
        SessionTokenProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Prefer get_db_session() in request handlers.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from credential_service.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    settings = get_settings()
    use_json = not settings.is_development
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (cost factor from BCRYPT_ROUNDS)."""
    from credential_service.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_service() -> "SessionTokenProtocol":
    """Get JWT session token service singleton."""
    from credential_service.infrastructure.security import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.jwt_secret_key,
        expiration_hours=settings.jwt_expire_hours,
    )


@lru_cache()
def get_password_reset_token_service() -> "OneTimeTokenServiceProtocol":
    from credential_service.infrastructure.security import PasswordResetTokenService

    return PasswordResetTokenService()


@lru_cache()
def get_email_verification_token_service() -> "OneTimeTokenServiceProtocol":
    from credential_service.infrastructure.security import (
        EmailVerificationTokenService,
    )

    return EmailVerificationTokenService()


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Adapter chosen by EMAIL_BACKEND:
        - stub: StubEmailService (logs instead of sending)
        - smtp: SMTPEmailService
        - ses: SESEmailService
    """
    settings = get_settings()

    if settings.email_backend == EmailBackend.SMTP:
        from credential_service.infrastructure.email import SMTPEmailService

        return SMTPEmailService(
            host=settings.smtp_host,
            port=settings.smtp_port,
            from_address=settings.email_from,
            logger=get_logger(),
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            timeout=settings.smtp_timeout_seconds,
        )

    if settings.email_backend == EmailBackend.SES:
        from credential_service.infrastructure.email import SESEmailService

        return SESEmailService(
            from_address=settings.email_from,
            region=settings.aws_region,
            logger=get_logger(),
        )

    from credential_service.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger(), from_address=settings.email_from)


def clear_singletons() -> None:
    """Drop every cached singleton, settings included.

    Used by tests after changing environment variables.
    """
    for factory in (
        get_database,
        get_logger,
        get_password_service,
        get_token_service,
        get_password_reset_token_service,
        get_email_verification_token_service,
        get_email_service,
    ):
        factory.cache_clear()
    get_settings.cache_clear()


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
