"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class DependencyInstallError(ApplicationError):
    """Raised when a required client library could not be installed."""


class AuthError(ApplicationError):
    """Raised when authentication against the identity provider fails."""


class ApiError(ApplicationError):
    """Raised when reading from the directory API fails."""
