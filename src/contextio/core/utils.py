"""
Utility functions for transport error handling.
"""

import httpx

from ..exceptions import ContextIOError, NetworkError, RequestTimeoutError


def map_transport_exception(exception: Exception, url: str) -> ContextIOError:
    """Map an httpx exception to the matching SDK exception."""
    details = {"url": url}

    if isinstance(exception, httpx.TimeoutException):
        return RequestTimeoutError(f"Request timed out: {url}", details)
    elif isinstance(exception, httpx.RequestError):
        return NetworkError(f"Request failed: {exception}", details)
    else:
        return ContextIOError(f"Unexpected transport error: {exception}", details)
