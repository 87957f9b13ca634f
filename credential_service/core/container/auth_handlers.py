"""Account handler dependency factories.

Request-scoped handler instances: each request gets a UserRepository bound
to its own session, combined with the app-scoped services.

Usage:
    @router.post("/register")
    async def register(
        handler: RegisterUserHandler = Depends(get_register_user_handler),
    ):
        result = await handler.handle(command)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from credential_service.application.commands.handlers import (
    ConfirmPasswordResetHandler,
    LoginUserHandler,
    RegisterUserHandler,
    RequestPasswordResetHandler,
    SendVerificationEmailHandler,
    VerifyEmailHandler,
)
from credential_service.core.config import get_settings
from credential_service.core.container.infrastructure import (
    get_db_session,
    get_email_service,
    get_email_verification_token_service,
    get_logger,
    get_password_reset_token_service,
    get_password_service,
    get_token_service,
)
from credential_service.domain.protocols import EmailProtocol
from credential_service.infrastructure.persistence.repositories import UserRepository


async def get_register_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> RegisterUserHandler:
    return RegisterUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_login_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> LoginUserHandler:
    return LoginUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_request_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
    email_service: EmailProtocol = Depends(get_email_service),
) -> RequestPasswordResetHandler:
    """Get RequestPasswordReset handler (request-scoped).

    The reset link base comes from WEB_APP_URL. The email service is a
    dependency so tests can swap it through app.dependency_overrides.
    """
    return RequestPasswordResetHandler(
        user_repo=UserRepository(session=session),
        token_service=get_password_reset_token_service(),
        email_service=email_service,
        logger=get_logger(),
        web_app_url=get_settings().web_app_url,
    )


async def get_confirm_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ConfirmPasswordResetHandler:
    return ConfirmPasswordResetHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_send_verification_email_handler(
    session: AsyncSession = Depends(get_db_session),
    email_service: EmailProtocol = Depends(get_email_service),
) -> SendVerificationEmailHandler:
    return SendVerificationEmailHandler(
        user_repo=UserRepository(session=session),
        token_service=get_email_verification_token_service(),
        email_service=email_service,
        logger=get_logger(),
        web_app_url=get_settings().web_app_url,
    )


async def get_verify_email_handler(
    session: AsyncSession = Depends(get_db_session),
) -> VerifyEmailHandler:
    return VerifyEmailHandler(
        user_repo=UserRepository(session=session),
        logger=get_logger(),
    )
