"""Credential service: registration, login, password reset and email verification."""

__version__ = "0.1.0"
