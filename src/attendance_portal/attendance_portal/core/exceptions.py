class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class RecordNotFoundError(DomainError):
    """Raised by a repository when a single-row lookup matches nothing."""


class IdentityResolutionError(DomainError):
    """Raised when an employee could not be looked up or registered."""


class StaleSessionError(DomainError):
    """Raised when a result belongs to a session that has since logged out."""
