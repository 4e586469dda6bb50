class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a child or an entry does not exist."""


class AuthenticationError(DomainError):
    """Raised when the password is wrong or no session is active."""


class StorageError(DomainError):
    """Raised when a JSON collection file cannot be read or written."""
