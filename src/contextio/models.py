"""
Data models for Context.IO API responses.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from .core.response import response_has_error
from .exceptions import APIResponseError, ResponseDecodeError


@dataclass
class ContextIOResponse:
    """
    Result of a single Context.IO API call.

    Every call returns one of these, including calls the API rejected.
    Check ``has_error`` (or call ``raise_for_error``) before using the body.

    Attributes:
        code: HTTP status code
        request_headers: Headers sent with the request (empty unless the
            client saves headers)
        response_headers: Headers received (empty unless the client saves
            headers)
        content_type: Value of the response's Content-Type header
        body: Raw response body
        raw: The underlying transport response

    Example:
        >>> response = client.all_messages("me@example.com", since="0")
        >>> if not response.has_error:
        ...     messages = response.json()
    """

    code: int
    request_headers: Dict[str, str] = field(default_factory=dict)
    response_headers: Dict[str, str] = field(default_factory=dict)
    content_type: str = ""
    body: str = ""
    raw: Optional[httpx.Response] = field(default=None, repr=False, compare=False)

    @property
    def has_error(self) -> bool:
        """True when the status is not 200 or the body is not JSON."""
        return response_has_error(self.code, self.content_type)

    def decode_response(self) -> str:
        """Return the raw body; the error flag is derived, not stored."""
        return self.body

    def json(self) -> Any:
        """Decode the body as JSON."""
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise ResponseDecodeError(
                f"Response body is not valid JSON: {e}",
                {"code": self.code, "content_type": self.content_type},
            ) from e

    @property
    def messages(self) -> List[Any]:
        """The API's ``messages`` array, or an empty list."""
        try:
            decoded = json.loads(self.body)
        except ValueError:
            return []

        if isinstance(decoded, dict) and isinstance(decoded.get("messages"), list):
            return decoded["messages"]
        return []

    def raise_for_error(self) -> "ContextIOResponse":
        """Raise ``APIResponseError`` when the response is flagged."""
        if self.has_error:
            raise APIResponseError(
                f"Context.IO request failed ({self.code}, {self.content_type or 'no content type'})",
                code=self.code,
                content_type=self.content_type,
                body=self.body,
            )
        return self
