class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidPeriodError(ValidationError):
    """Raised when a pay period has no working days to normalize against."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or payroll entry does not exist."""


class ConflictError(DomainError):
    """Raised when a payroll entry already exists for the period."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
