"""Custom exceptions for the toys client."""

from __future__ import annotations


class ToysError(Exception):
    """Base exception for all toys errors."""


class TransportError(ToysError):
    """Raised when an HTTP round trip fails before a usable body is read."""


class ToysConnectionError(TransportError):
    """Raised when the client cannot connect to the remote service."""


class ToysTimeoutError(TransportError):
    """Raised when a request exceeds the configured timeout."""


class ToysAPIError(TransportError):
    """Raised when the remote service returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class DecodeError(ToysError):
    """Raised when a response body is not valid JSON or does not match the model."""


class LocalInterfaceError(ToysError):
    """Raised when no usable network interface is available for local discovery."""


class ConfigurationError(ToysError):
    """Raised when a required setting, such as an API key, is missing."""
