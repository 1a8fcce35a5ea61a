"""
Pure functions for building Context.IO request URLs and bodies.
"""

from typing import Dict, Mapping
from urllib.parse import urlencode

from .._version import __version__

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
USER_AGENT = f"contextio-python/{__version__}"


def build_default_headers() -> Dict[str, str]:
    return {"User-Agent": USER_AGENT, "Accept": "application/json"}


def build_base_url(ssl: bool, host: str, api_version: str) -> str:
    """Build ``scheme://host/api_version/``."""
    scheme = "https" if ssl else "http"
    return f"{scheme}://{host}/{api_version}/"


def build_url(ssl: bool, host: str, api_version: str, action: str) -> str:
    """Build the full URL of an action path."""
    return build_base_url(ssl, host, api_version) + action


def append_query(url: str, params: Mapping[str, str]) -> str:
    """Append URL-encoded parameters to ``url`` as a query string."""
    if not params:
        return url

    separator = "&" if "?" in url else "?"
    return url + separator + urlencode(list(params.items()))


def encode_form(params: Mapping[str, str]) -> str:
    """Encode parameters as an ``application/x-www-form-urlencoded`` body."""
    return urlencode(list(params.items()))

