class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when the targeted record does not exist."""


class StorageError(Exception):
    """Raised when the database driver fails."""


class DuplicateEntryError(StorageError):
    """Raised when an insert violates a unique key."""
