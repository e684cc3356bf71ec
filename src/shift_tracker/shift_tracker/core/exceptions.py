class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTime(ValidationError):
    """Raised when an HH:MM time-of-day string cannot be used."""


class InvalidTimestamp(ValidationError):
    """Raised when an instant is malformed or inconsistent."""


class MissingField(ValidationError):
    """Raised when a required input is absent."""


class InvalidTransition(DomainError):
    """Raised when a punch action does not fit the current punch state."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
