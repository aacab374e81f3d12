"""Custom exceptions for the ReviewGate service."""


class ReviewGateException(Exception):
    """Base exception for ReviewGate application."""

    pass


class ValidationError(ReviewGateException):
    """Raised when required input is missing or malformed."""

    pass


class AuthenticationError(ReviewGateException):
    """Raised when the webhook secret does not match."""

    pass


class UpstreamError(ReviewGateException):
    """Raised when the classification service call fails or reports an error."""

    pass


class PersistenceError(ReviewGateException):
    """Raised when a datastore read or write fails."""

    pass


class ConfigurationError(ReviewGateException):
    """Raised when configuration is invalid."""

    pass
