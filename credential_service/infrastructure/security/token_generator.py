"""Cryptographically random hex tokens.

Reads the OS CSPRNG through `secrets`. A failure of the randomness source
propagates; there is no fallback to a weaker generator.
"""

import secrets


def generate_random_token(byte_length: int) -> str:
    """Generate a random hex token.

    Args:
        byte_length: Number of random bytes (must be positive).

    Returns:
        Lowercase hex string of length 2 * byte_length.

    Raises:
        ValueError: If byte_length is not positive.

    Example:
        >>> len(generate_random_token(32))
        64
    """
    if byte_length <= 0:
        raise ValueError("byte_length must be positive")
    return secrets.token_hex(byte_length)
