"""
Core pure functions for the SDK.

This package contains I/O-free functions for parameter filtering,
URL building, request signing and response wrapping.
"""

from .params import (
    filter_params,
    with_account,
    merge_fixed_params,
)

from .request import (
    build_base_url,
    build_url,
    append_query,
    encode_form,
    build_default_headers,
)

from .auth import build_signer, sign_request

from .utils import map_transport_exception

from .response import (
    media_type,
    is_json_content_type,
    response_has_error,
    build_response,
)

__all__ = [
    # Parameter functions
    "filter_params",
    "with_account",
    "merge_fixed_params",
    # Request functions
    "build_base_url",
    "build_url",
    "append_query",
    "encode_form",
    "build_default_headers",
    # Signing functions
    "build_signer",
    "sign_request",
    # Transport functions
    "map_transport_exception",
    # Response functions
    "media_type",
    "is_json_content_type",
    "response_has_error",
    "build_response",
]
