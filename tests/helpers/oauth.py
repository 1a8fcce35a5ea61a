"""
Server-side OAuth 1.0a verification for signed requests captured by tests.
"""

import httpx
from oauthlib.oauth1 import RequestValidator, SignatureOnlyEndpoint


class ConsumerValidator(RequestValidator):
    """Accepts a single consumer and any nonce, as a two-legged provider would."""

    def __init__(self, consumer_key="key", consumer_secret="secret"):
        super().__init__()
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret

    @property
    def dummy_client(self):
        return "dummy"

    def check_client_key(self, client_key):
        return True

    def check_nonce(self, nonce):
        return True

    def validate_timestamp_and_nonce(
        self, client_key, timestamp, nonce, request, request_token=None, access_token=None
    ):
        return True

    def validate_client_key(self, client_key, request):
        return client_key == self.consumer_key

    def get_client_secret(self, client_key, request):
        return self.consumer_secret


def verify_signature(request: httpx.Request, consumer_secret: str = "secret") -> bool:
    """Return True when ``request`` carries a valid signature for the consumer."""
    endpoint = SignatureOnlyEndpoint(ConsumerValidator(consumer_secret=consumer_secret))
    valid, _ = endpoint.validate_request(
        str(request.url),
        http_method=request.method,
        body=request.content.decode("utf-8"),
        headers=dict(request.headers),
    )
    return valid
