"""Account router.

Endpoints:
    POST /auth/register           201 {message} | 400 {error}
    POST /auth/login              200 {token, expires_in} | 401 {error}
    POST /auth/forgot-password    200 {message} (always) | 500 {error}
    POST /auth/reset-password     200 {message} | 400 {error}
    POST /auth/send-verification  200 {message} | 400 {error}
    POST /auth/verify-email       200 {message} | 400 {error}

Any DependencyError (storage or email transport) answers 500.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from credential_service.application.commands.auth_commands import (
    ConfirmPasswordReset,
    LoginUser,
    RegisterUser,
    RequestPasswordReset,
    SendVerificationEmail,
    VerifyEmail,
)
from credential_service.application.commands.handlers import (
    ConfirmPasswordResetHandler,
    LoginUserHandler,
    RegisterUserHandler,
    RequestPasswordResetHandler,
    SendVerificationEmailHandler,
    VerifyEmailHandler,
)
from credential_service.core.container import (
    get_confirm_password_reset_handler,
    get_login_user_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_send_verification_email_handler,
    get_verify_email_handler,
)
from credential_service.core.result import Failure, Success
from credential_service.presentation.routers.errors import failure_response
from credential_service.schemas.auth_schemas import (
    ErrorResponse,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
    SendVerificationRequest,
    VerifyEmailRequest,
)

router = APIRouter(prefix="/auth", tags=["Auth"])


class AuthMessage:
    """Success messages returned by the account endpoints."""

    REGISTERED = "User registered successfully"
    RESET_REQUESTED = (
        "If an account exists with that email, a password reset link has been sent"
    )
    PASSWORD_RESET = "Password has been reset successfully"
    VERIFICATION_SENT = "Verification email has been sent"
    EMAIL_VERIFIED = "Email has been verified successfully"


_ERRORS = {
    400: {"model": ErrorResponse, "description": "Validation or token error"},
    500: {"model": ErrorResponse, "description": "Storage or email failure"},
}


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses=_ERRORS,
    summary="Register account",
)
async def register(
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> MessageResponse | JSONResponse:
    """Create an account from email and password.

    Returns:
        201 on success. 400 for invalid email, weak password or a taken email.
    """
    result = await handler.handle(RegisterUser(email=data.email, password=data.password))

    match result:
        case Success():
            return MessageResponse(message=AuthMessage.REGISTERED)
        case Failure(error=error):
            return failure_response(error)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
        500: _ERRORS[500],
    },
    summary="Log in",
)
async def login(
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> LoginResponse | JSONResponse:
    """Exchange credentials for a session token.

    Unknown email and wrong password produce the same 401.
    """
    result = await handler.handle(LoginUser(email=data.email, password=data.password))

    match result:
        case Success(value=login_result):
            return LoginResponse(
                token=login_result.token, expires_in=login_result.expires_in
            )
        case Failure(error=error):
            return failure_response(error, status.HTTP_401_UNAUTHORIZED)


@router.post(
    "/forgot-password",
    response_model=MessageResponse,
    responses={500: _ERRORS[500]},
    summary="Request password reset",
)
async def forgot_password(
    data: ForgotPasswordRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> MessageResponse | JSONResponse:
    """Email a reset link. The response does not reveal whether the account exists."""
    result = await handler.handle(RequestPasswordReset(email=data.email))

    match result:
        case Success():
            return MessageResponse(message=AuthMessage.RESET_REQUESTED)
        case Failure(error=error):
            return failure_response(error)


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    responses=_ERRORS,
    summary="Reset password",
)
async def reset_password(
    data: ResetPasswordRequest,
    handler: ConfirmPasswordResetHandler = Depends(get_confirm_password_reset_handler),
) -> MessageResponse | JSONResponse:
    result = await handler.handle(
        ConfirmPasswordReset(token=data.token, new_password=data.new_password)
    )

    match result:
        case Success():
            return MessageResponse(message=AuthMessage.PASSWORD_RESET)
        case Failure(error=error):
            return failure_response(error)


@router.post(
    "/send-verification",
    response_model=MessageResponse,
    responses=_ERRORS,
    summary="Send verification email",
)
async def send_verification(
    data: SendVerificationRequest,
    handler: SendVerificationEmailHandler = Depends(
        get_send_verification_email_handler
    ),
) -> MessageResponse | JSONResponse:
    """Email a verification link.

    Unknown and already-verified emails are reported (400).
    """
    result = await handler.handle(SendVerificationEmail(email=data.email))

    match result:
        case Success():
            return MessageResponse(message=AuthMessage.VERIFICATION_SENT)
        case Failure(error=error):
            return failure_response(error)


@router.post(
    "/verify-email",
    response_model=MessageResponse,
    responses=_ERRORS,
    summary="Verify email",
)
async def verify_email(
    data: VerifyEmailRequest,
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> MessageResponse | JSONResponse:
    result = await handler.handle(VerifyEmail(token=data.token))

    match result:
        case Success():
            return MessageResponse(message=AuthMessage.EMAIL_VERIFIED)
        case Failure(error=error):
            return failure_response(error)
