"""
Two-legged OAuth 1.0a request signing.

Context.IO authenticates every call with the consumer key and secret only,
so no token is ever attached to the request.
"""

from typing import Dict, Optional, Tuple

from oauthlib.oauth1 import (
    Client,
    SIGNATURE_HMAC_SHA1,
    SIGNATURE_TYPE_AUTH_HEADER,
    SIGNATURE_TYPE_QUERY,
)

from .request import FORM_CONTENT_TYPE


def build_signer(
    consumer_key: str,
    consumer_secret: str,
    auth_headers: bool = False,
    nonce: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> Client:
    """Create an OAuth client that places parameters in the query or header."""
    signature_type = SIGNATURE_TYPE_AUTH_HEADER if auth_headers else SIGNATURE_TYPE_QUERY
    return Client(
        consumer_key,
        client_secret=consumer_secret,
        signature_method=SIGNATURE_HMAC_SHA1,
        signature_type=signature_type,
        nonce=nonce,
        timestamp=timestamp,
    )


def sign_request(
    signer: Client, method: str, url: str, body: Optional[str] = None
) -> Tuple[str, Dict[str, str], Optional[str]]:
    """Sign a request and return the signed ``(url, headers, body)``.

    A POST body is form encoded, so its parameters are part of the
    signature base string.
    """
    headers = {}
    if method == "POST":
        headers["Content-Type"] = FORM_CONTENT_TYPE
        body = body or ""
    else:
        body = None

    signed_url, signed_headers, signed_body = signer.sign(
        url, http_method=method, body=body, headers=headers
    )
    return signed_url, dict(signed_headers), signed_body
