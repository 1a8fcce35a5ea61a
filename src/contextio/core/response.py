"""
Pure functions for turning transport responses into response records.
"""

from typing import TYPE_CHECKING, Dict, Mapping

import httpx

if TYPE_CHECKING:
    from ..models import ContextIOResponse

JSON_MEDIA_TYPE = "application/json"


def media_type(content_type: str) -> str:
    """Return the lowercased media type without parameters."""
    return content_type.split(";", 1)[0].strip().lower()


def is_json_content_type(content_type: str) -> bool:
    return media_type(content_type) == JSON_MEDIA_TYPE


def response_has_error(code: int, content_type: str) -> bool:
    """A response is flagged unless it is a 200 carrying JSON."""
    return code != 200 or not is_json_content_type(content_type)


def headers_to_dict(headers: Mapping[str, str]) -> Dict[str, str]:
    return {key: value for key, value in headers.items()}


def build_response(
    response: httpx.Response, save_headers: bool = False
) -> "ContextIOResponse":
    """Wrap an ``httpx.Response`` into a ``ContextIOResponse``.

    Headers are only kept on the record when ``save_headers`` is set; the
    content type is always read.
    """
    from ..models import ContextIOResponse

    request_headers: Dict[str, str] = {}
    response_headers: Dict[str, str] = {}
    if save_headers:
        request_headers = headers_to_dict(response.request.headers)
        response_headers = headers_to_dict(response.headers)

    return ContextIOResponse(
        code=response.status_code,
        request_headers=request_headers,
        response_headers=response_headers,
        content_type=response.headers.get("Content-Type", ""),
        body=response.text,
        raw=response,
    )
