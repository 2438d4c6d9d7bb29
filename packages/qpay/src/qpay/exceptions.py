"""
Custom exceptions for the QPay client package.

Every error raised by the SDK derives from ``QPayError`` so callers can catch
the whole family at once, or a specific kind when they need to tell
"the server rejected us" apart from "the server's answer was unreadable".
"""

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from qpay.baseclient.response import RawResponse


class QPayError(Exception):
    """Base exception for all QPay client errors."""

    def __init__(self, message: str, *args, **kwargs):
        super().__init__(message, *args)
        self.message = message
        self.details = kwargs

    def __str__(self) -> str:
        return f"qpay: {self.message}"


class ConfigurationError(QPayError):
    """Raised when client configuration is missing or invalid."""

    def __init__(self, message: str, variable: str | None = None):
        super().__init__(message, variable=variable)
        self.variable = variable

    @classmethod
    def missing(cls, variable: str) -> "ConfigurationError":
        return cls(f"required environment variable {variable} is not set", variable)


class TransportError(QPayError):
    """Raised when a request could not be sent or no response was received."""

    pass


class ProxyError(TransportError):
    """Raised when there's an issue with the proxy configuration or connection."""

    pass


class RequestTimeoutError(TransportError):
    """Raised when a request times out."""

    pass


class EncodingError(QPayError):
    """Raised when a request body cannot be serialized to JSON."""

    def __str__(self) -> str:
        return f"qpay: failed to encode request - {self.message}"


class DecodingError(QPayError):
    """Raised when a successful response body cannot be parsed."""

    def __str__(self) -> str:
        return f"qpay: failed to decode response - {self.message}"


class APIError(QPayError):
    """
    Raised when the QPay API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status code of the response.
        code: Service error code from the body's ``error`` field, or the
              standard HTTP reason phrase when the body carries none.
        message: Human readable message from the body's ``message`` field,
                 or the raw body text.
        raw_body: The response body exactly as received.
    """

    def __init__(self, status_code: int, code: str, message: str, raw_body: str):
        super().__init__(
            message,
            status_code=status_code,
            code=code,
            raw_body=raw_body,
        )
        self.status_code = status_code
        self.code = code
        self.raw_body = raw_body

    def __str__(self) -> str:
        return f"qpay: {self.code} - {self.message} (status {self.status_code})"

    @classmethod
    def from_response(cls, response: "RawResponse") -> "APIError":
        """
        Build an APIError from a raw error response.

        The body is parsed as ``{"error": ..., "message": ...}`` when possible;
        either field falls back independently when absent or not a string.
        """
        raw_body = response.text

        error_code = None
        error_message = None
        try:
            parsed = json.loads(raw_body)
        except ValueError:
            parsed = None
        if isinstance(parsed, dict):
            if isinstance(parsed.get("error"), str):
                error_code = parsed["error"]
            if isinstance(parsed.get("message"), str):
                error_message = parsed["message"]

        if error_code is None:
            error_code = response.reason_phrase or f"HTTP {response.status_code}"

        return cls(
            status_code=response.status_code,
            code=error_code,
            message=error_message if error_message is not None else raw_body,
            raw_body=raw_body,
        )
