import httpx
import pytest

from contextio import AsyncContextIO, ContextIO
from tests.helpers.transport import RecordingHandler


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "CONTEXTIO_CONSUMER_KEY",
        "CONTEXTIO_CONSUMER_SECRET",
        "CONTEXTIO_API_VERSION",
        "CONTEXTIO_SSL",
        "CONTEXTIO_AUTH_HEADERS",
        "CONTEXTIO_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_client():
    clients = []

    def factory(handler, **options):
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        client = ContextIO("key", "secret", http_client=http_client, **options)
        clients.append(http_client)
        return client

    yield factory

    for http_client in clients:
        http_client.close()


@pytest.fixture
def make_async_client():
    def factory(handler, **options):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return AsyncContextIO("key", "secret", http_client=http_client, **options)

    return factory
