"""Exceptions for the Short Iron service layer.

This module contains the exception hierarchy for the service layer,
providing domain-specific exceptions that abstract underlying implementation details.
"""


class ServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class URLError(ServiceError):
    """Base exception for URL-related errors."""
    pass


class InvalidURLError(URLError):
    """The submitted value is not a valid absolute URL."""

    def __init__(self, raw, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid URL {raw!r}: {reason}")


class RegistryIntegrityError(ServiceError):
    """The registry could not keep its one-to-one mapping intact.

    Never reported to clients; the global exception handler turns it into a 500.
    """
    pass
