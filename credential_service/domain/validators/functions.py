"""Centralized validation functions.

Validators are pure functions that raise ValueError on failure. The
exception message is user-facing: handlers copy it into a ValidationError
unchanged, so every rule has its own wording.
"""

import re
import unicodedata

from email_validator import EmailNotValidError
from email_validator import validate_email as _parse_email

from credential_service.core.constants import (
    BCRYPT_MAX_PASSWORD_BYTES,
    PASSWORD_MIN_LENGTH,
    TOKEN_MIN_LENGTH,
)

_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]+$")


def validate_email(v: str) -> str:
    """Validate email format.

    Parsing is delegated to email-validator (syntax only, no DNS lookup).

    Args:
        v: Email address to validate.

    Returns:
        The address unchanged. Stored emails keep the submitted casing.

    Raises:
        ValueError: "email is required" or "invalid email format".

    Example:
        >>> validate_email("user@example.com")
        'user@example.com'
        >>> validate_email("invalid")
        ValueError: invalid email format
    """
    if not v:
        raise ValueError("email is required")
    try:
        _parse_email(v, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError("invalid email format") from e
    return v


def _is_number(c: str) -> bool:
    """Unicode number (N*) character. CJK numeral ideographs are letters (Lo)."""
    return unicodedata.category(c)[0] == "N"


def _is_special(c: str) -> bool:
    """Unicode punctuation (P*) or symbol (S*) character."""
    return unicodedata.category(c)[0] in ("P", "S")


def validate_strong_password(v: str) -> str:
    """Validate password strength.

    Rules are checked in order and the first failure wins: length,
    uppercase, lowercase, digit, punctuation or symbol. Letter and digit
    classes follow Unicode, so "É" counts as uppercase.

    Args:
        v: Password to validate.

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: If password doesn't meet requirements.

    Example:
        >>> validate_strong_password("Valid1Pass!")
        'Valid1Pass!'
        >>> validate_strong_password("NoSymbol99Aa")
        ValueError: password must contain at least one special character
    """
    if len(v) < PASSWORD_MIN_LENGTH:
        raise ValueError(
            f"password must be at least {PASSWORD_MIN_LENGTH} characters"
        )
    if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(
            f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
        )
    if not any(c.isupper() for c in v):
        raise ValueError("password must contain at least one uppercase letter")
    if not any(c.islower() for c in v):
        raise ValueError("password must contain at least one lowercase letter")
    if not any(_is_number(c) for c in v):
        raise ValueError("password must contain at least one number")
    if not any(_is_special(c) for c in v):
        raise ValueError("password must contain at least one special character")
    return v


def validate_token_format(v: str, *, kind: str = "token") -> str:
    """Validate an opaque reset/verification token.

    Args:
        v: Token string to validate.
        kind: Word used in error messages ("reset token", "verification token").

    Returns:
        Token unchanged (validation only).

    Raises:
        ValueError: If the token is shorter than 32 characters or not hex.

    Example:
        >>> validate_token_format("ab" * 32)
        'abab...'
        >>> validate_token_format("not-hex!", kind="reset token")
        ValueError: invalid reset token
    """
    if len(v) < TOKEN_MIN_LENGTH:
        raise ValueError(f"invalid {kind}")
    if not _HEX_PATTERN.match(v):
        raise ValueError(f"invalid {kind} format")
    return v
