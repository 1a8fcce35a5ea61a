"""
Tests for the async client.
"""

import httpx
import pytest

from contextio import Action
from contextio.exceptions import NetworkError, RequestTimeoutError
from tests.helpers.transport import RecordingHandler


class TestAsyncContextIO:
    @pytest.mark.asyncio
    async def test_named_operation(self, make_async_client, handler):
        async with make_async_client(handler) as client:
            response = await client.all_messages("me@example.com", {"since": "0", "x": "1"})

        params = handler.last.url.params
        assert params["since"] == "0"
        assert params["account"] == "me@example.com"
        assert "x" not in params
        assert response.has_error is False

    @pytest.mark.asyncio
    async def test_execute_with_fixed_params(self, make_async_client, handler):
        async with make_async_client(handler) as client:
            await client.execute(Action.DIFF_SUMMARY, "me@example.com", fileId1="a")
        assert handler.last.url.params["generate"] == "1"

    @pytest.mark.asyncio
    async def test_error_response_returned(self, make_async_client):
        handler = RecordingHandler(403, content=b"denied", headers={"Content-Type": "text/plain"})
        async with make_async_client(handler) as client:
            response = await client.get(None, "search.json")
        assert response.code == 403
        assert response.has_error is True

    @pytest.mark.asyncio
    async def test_post(self, make_async_client, handler):
        async with make_async_client(handler) as client:
            await client.post("me@example.com", "imap/removeaccount.json", {"label": "1"})
        assert handler.last.method == "POST"
        assert handler.last.content == b"label=1&account=me%40example.com"

    @pytest.mark.asyncio
    async def test_get_many(self, make_async_client, handler):
        async with make_async_client(handler) as client:
            responses = await client.get_many(["a@x.com", "b@x.com", "c@x.com"], "search.json")
        assert len(responses) == 3
        accounts = sorted(r.url.params["account"] for r in handler.requests)
        assert accounts == ["a@x.com", "b@x.com", "c@x.com"]

    @pytest.mark.asyncio
    async def test_network_error(self, make_async_client):
        def failing(request):
            raise httpx.ConnectError("refused", request=request)

        async with make_async_client(failing) as client:
            with pytest.raises(NetworkError):
                await client.search("me@example.com", subject="x")

    @pytest.mark.asyncio
    async def test_timeout(self, make_async_client):
        def slow(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        async with make_async_client(slow) as client:
            with pytest.raises(RequestTimeoutError):
                await client.get(None, "search.json")
