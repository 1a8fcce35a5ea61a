"""
Context.IO SDK

Python client for the Context.IO email-indexing API.
"""

from ._version import __version__
from .client import ContextIO, AsyncContextIO
from .actions import Action, ActionSpec, ACTIONS
from .models import ContextIOResponse
from .config import ContextIOSettings
from .exceptions import (
    ContextIOError,
    InvalidInputError,
    NetworkError,
    RequestTimeoutError,
    ResponseDecodeError,
    APIResponseError,
    NotImplementedOperationError,
)

__all__ = [
    "ContextIO",
    "AsyncContextIO",
    "Action",
    "ActionSpec",
    "ACTIONS",
    "ContextIOResponse",
    "ContextIOSettings",
    "ContextIOError",
    "InvalidInputError",
    "NetworkError",
    "RequestTimeoutError",
    "ResponseDecodeError",
    "APIResponseError",
    "NotImplementedOperationError",
]
