"""Account commands (write operations)."""

from credential_service.application.commands.auth_commands import (
    ConfirmPasswordReset,
    LoginUser,
    RegisterUser,
    RequestPasswordReset,
    SendVerificationEmail,
    VerifyEmail,
)

__all__ = [
    "RegisterUser",
    "LoginUser",
    "RequestPasswordReset",
    "ConfirmPasswordReset",
    "SendVerificationEmail",
    "VerifyEmail",
]
