class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request parameters are invalid (e.g. a reversed date range)."""
