class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class SignoffLockedError(DomainError):
    """Raised when a sign-off has used all of its overwrites."""


class SignoffConflictError(DomainError):
    """Raised when a concurrent submission changed the sign-off first."""


class NotificationError(DomainError):
    """Raised when the sign-off email could not be sent."""
