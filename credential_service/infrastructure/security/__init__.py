"""Security adapters: password hashing, session tokens, one-time tokens."""

from credential_service.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from credential_service.infrastructure.security.email_verification_token_service import (
    EmailVerificationTokenService,
)
from credential_service.infrastructure.security.jwt_service import JWTService
from credential_service.infrastructure.security.password_reset_token_service import (
    PasswordResetTokenService,
)
from credential_service.infrastructure.security.token_generator import (
    generate_random_token,
)

__all__ = [
    "BcryptPasswordService",
    "EmailVerificationTokenService",
    "JWTService",
    "PasswordResetTokenService",
    "generate_random_token",
]
