"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol with bcrypt. The cost factor comes from
settings (BCRYPT_ROUNDS); tests run with the minimum of 4 to stay fast.

Security:
    - Salt generated per hash and embedded in the output
    - Cost factor is logarithmic: each +1 doubles computation time
    - Only the first 72 bytes of a password are significant to bcrypt,
      so longer passwords are rejected by the password validator
"""

import bcrypt

from credential_service.core.constants import BCRYPT_ROUNDS_DEFAULT


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from credential_service.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = BCRYPT_ROUNDS_DEFAULT) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12, ~250ms per hash).

        Raises:
            ValueError: If cost_factor is outside bcrypt's 4..31 range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$<cost>$...),
            always 60 characters long.

        Raises:
            ValueError: If bcrypt refuses the input (over 72 bytes).
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hashed password from database.

        Returns:
            True if password matches hash, False otherwise (including
            malformed hashes and inputs bcrypt refuses).

        Example:
            >>> service = BcryptPasswordService()
            >>> service.verify_password("SecurePass123!", "invalid_hash")
            False
        """
        try:
            # bcrypt.checkpw does constant-time comparison
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, TypeError, AttributeError):
            return False
