"""Exceptions raised by adapters across domain ports."""


class DuplicateEmailError(Exception):
    """Raised by UserRepository.create when the email is already stored."""

    def __init__(self, email: str) -> None:
        super().__init__(f"email already exists: {email}")
        self.email = email


class EmailDeliveryError(Exception):
    """Raised by an email adapter when the transport rejects or fails a send."""

    def __init__(self, message: str, *, to_address: str | None = None) -> None:
        super().__init__(message)
        self.to_address = to_address


class StorageError(Exception):
    """Raised by a repository when the backing store fails."""
