"""
Error taxonomy for the distance matrix client.

Everything fatal derives from ``DistanceMatrixError`` so callers can catch a
single type. Input problems also subclass ``ValueError``.

    DistanceMatrixError
    ├── ConfigurationError   bad option / missing API key (construction)
    ├── ValidationError      bad origins/destinations (before any request)
    ├── TransportError       network failure / non-2xx HTTP status
    │   └── ServiceStatusError   top-level status other than OK
    └── EmptyPayloadError    2xx response without a usable body

``MalformedElementWarning`` is a warning category, not an error: it is
emitted when one coordinate inside a list is dropped.
"""

from __future__ import annotations


class DistanceMatrixError(Exception):
    """Base class for all client errors."""


class ConfigurationError(DistanceMatrixError, ValueError):
    """An option or credential rejected while building a client."""

    def __init__(self, field: str, value: object = None, message: str | None = None) -> None:
        self.field = field
        self.value = value
        if message is None:
            message = f"invalid value for {field}: {value!r}"
        super().__init__(message)


class ValidationError(DistanceMatrixError, ValueError):
    """Origins or destinations that cannot be turned into a request."""


class TransportError(DistanceMatrixError):
    """The request could not be completed or was answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ServiceStatusError(TransportError):
    """The service answered, but refused the request as a whole."""

    def __init__(self, status: str, error_message: str | None = None) -> None:
        self.status = status
        self.error_message = error_message
        message = f"service returned status {status}"
        if error_message:
            message = f"{message}: {error_message}"
        super().__init__(message)


class EmptyPayloadError(DistanceMatrixError):
    """A successful response whose body could not be used."""


class MalformedElementWarning(UserWarning):
    """A coordinate inside a list was malformed and has been dropped."""
