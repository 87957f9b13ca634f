"""Command handlers, one per account workflow."""

from credential_service.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
)
from credential_service.application.commands.handlers.login_user_handler import (
    LoginResult,
    LoginUserHandler,
)
from credential_service.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from credential_service.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from credential_service.application.commands.handlers.send_verification_email_handler import (
    SendVerificationEmailHandler,
)
from credential_service.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)

__all__ = [
    "ConfirmPasswordResetHandler",
    "LoginResult",
    "LoginUserHandler",
    "RegisterUserHandler",
    "RequestPasswordResetHandler",
    "SendVerificationEmailHandler",
    "VerifyEmailHandler",
]
