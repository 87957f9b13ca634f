"""Account request/response schemas.

Pydantic models for the HTTP layer, kept separate from domain entities.

Request fields are plain strings defaulting to "": format and strength
rules live in the domain validators so each failure can carry its own
message ("email is required", "password must contain ..."). A body that
is not a JSON object, or has non-string fields, fails at this layer
instead and is answered with "Invalid request body".

Endpoints:
    POST /auth/register            - Create account
    POST /auth/login               - Issue session token
    POST /auth/forgot-password     - Email a reset link
    POST /auth/reset-password      - Redeem reset token
    POST /auth/send-verification   - Email a verification link
    POST /auth/verify-email        - Redeem verification token
"""

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(extra="ignore")


# =============================================================================
# Requests
# =============================================================================


class RegisterRequest(_Request):
    """POST /auth/register"""

    email: str = Field(default="", examples=["user@example.com"])
    password: str = Field(default="", examples=["Valid1Pass!"])


class LoginRequest(_Request):
    """POST /auth/login"""

    email: str = Field(default="", examples=["user@example.com"])
    password: str = Field(default="", examples=["Valid1Pass!"])


class ForgotPasswordRequest(_Request):
    """POST /auth/forgot-password"""

    email: str = Field(default="", examples=["user@example.com"])


class ResetPasswordRequest(_Request):
    """POST /auth/reset-password"""

    token: str = Field(default="", description="Token from the reset link")
    new_password: str = Field(default="", examples=["N3w-Passw0rd"])


class SendVerificationRequest(_Request):
    """POST /auth/send-verification"""

    email: str = Field(default="", examples=["user@example.com"])


class VerifyEmailRequest(_Request):
    """POST /auth/verify-email"""

    token: str = Field(default="", description="Token from the verification link")


# =============================================================================
# Responses
# =============================================================================


class MessageResponse(BaseModel):
    """Generic success response."""

    message: str = Field(..., description="Human-readable outcome")


class LoginResponse(BaseModel):
    """Session token issued by POST /auth/login."""

    token: str = Field(..., description="Signed session token (JWT)")
    expires_in: int = Field(..., description="Token lifetime in seconds")


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str = Field(..., description="Human-readable error message")
