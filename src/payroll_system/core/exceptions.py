class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class RecordNotFoundError(DomainError):
    """Raised when no employee record matches the requested code."""


class StorageError(DomainError):
    """Raised when a data file cannot be opened, read or written."""


class CorruptRecordError(StorageError):
    """Raised when a full-size record cannot be decoded."""
