"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
UNAUTHORIZED = "UNAUTHORIZED"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
TOKEN_EXPIRED = "TOKEN_EXPIRED"
INVALID_TOKEN = "INVALID_TOKEN"
INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DuplicateResourceError(DomainError):
    """Raised when creating a resource would violate a uniqueness rule (admin email, policy number)."""

    pass


class UnauthorizedError(DomainError):
    """Raised when the caller could not be authenticated."""

    code = UNAUTHORIZED


class InvalidCredentialsError(UnauthorizedError):
    """Raised when an email/password pair does not match any admin."""

    code = INVALID_CREDENTIALS


class TokenExpiredError(UnauthorizedError):
    """Raised when a session credential is past its expiry."""

    code = TOKEN_EXPIRED


class InvalidTokenError(UnauthorizedError):
    """Raised when a session credential is malformed, forged or of the wrong type."""

    code = INVALID_TOKEN
