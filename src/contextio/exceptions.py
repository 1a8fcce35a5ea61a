"""
Custom exceptions for the Context.IO SDK.
"""

from typing import Dict, Any, Optional


class ContextIOError(Exception):
    """Base exception for Context.IO client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputError(ContextIOError):
    """Raised when caller-supplied input is invalid."""

    pass


class NetworkError(ContextIOError):
    """Raised when the request could not be delivered."""

    pass


class RequestTimeoutError(NetworkError):
    """Raised when the request exceeds the configured timeout."""

    pass


class ResponseDecodeError(ContextIOError):
    """Raised when a response body is not valid JSON."""

    pass


class APIResponseError(ContextIOError):
    """Raised by ``ContextIOResponse.raise_for_error`` for flagged responses."""

    def __init__(
        self,
        message: str,
        code: int,
        content_type: str,
        body: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.code = code
        self.content_type = content_type
        self.body = body


class NotImplementedOperationError(ContextIOError, NotImplementedError):
    """Raised when an API operation exists but is not supported by the SDK."""

    pass
