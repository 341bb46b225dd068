class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PersistenceError(DomainError):
    """Raised when the record store cannot list, create or delete records."""
