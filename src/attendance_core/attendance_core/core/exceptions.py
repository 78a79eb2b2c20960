class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when required configuration (e.g. a signing secret) is missing."""


class InvalidTokenError(DomainError):
    """Raised internally when a token fails verification.

    Public verify methods convert it into ``None``/``False`` so callers cannot
    tell expired, forged and malformed tokens apart.
    """
