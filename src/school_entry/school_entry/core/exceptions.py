class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class AuthenticationError(DomainError):
    """Raised when credentials or tokens are missing or invalid."""


class AuthorizationError(DomainError):
    """Raised when a principal lacks the role for an action."""


class NotFoundError(DomainError):
    """Raised when a student cannot be resolved anywhere."""


class StorageError(DomainError):
    """Raised when the database cannot be reached or a query fails."""
