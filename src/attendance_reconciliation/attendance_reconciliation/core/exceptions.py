class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when configuration data is invalid or violates domain rules."""


class MalformedDateError(DomainError):
    """Raised when a value cannot be read as a calendar date or time."""
