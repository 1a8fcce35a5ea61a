"""
Context.IO API clients.

``ContextIO`` issues blocking calls over ``httpx.Client``; ``AsyncContextIO``
exposes the same operations as coroutines over ``httpx.AsyncClient``.
"""

import asyncio
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

import httpx

from .actions import Action
from .config import (
    DEFAULT_API_VERSION,
    DEFAULT_ENDPOINT,
    ContextIOSettings,
    get_logger,
    get_settings,
    setup_logging,
)
from .core import (
    append_query,
    build_base_url,
    build_url as build_action_url,
    build_default_headers,
    build_response,
    build_signer,
    encode_form,
    filter_params,
    map_transport_exception,
    merge_fixed_params,
    sign_request,
    with_account,
)
from .exceptions import InvalidInputError, NotImplementedOperationError
from .models import ContextIOResponse

Params = Optional[Mapping[str, str]]
PreparedRequest = Tuple[str, str, Dict[str, str], Optional[str]]


def _operation(action: Action):
    """Build a client method for one entry of the action table."""
    spec = action.spec

    if spec.scoped:

        def method(self, account: str, params: Params = None, **kwargs: str):
            return self.execute(action, account, params, **kwargs)

    else:

        def method(self, params: Params = None, **kwargs: str):
            return self.execute(action, None, params, **kwargs)

    method.__name__ = action.value
    method.__qualname__ = action.value
    method.__doc__ = f"{spec.summary}\n\nAllowed parameters: {', '.join(spec.allowed) or 'none'}."
    return method


class ActionMethodsMixin:
    """Named methods for every Context.IO action."""

    addresses = _operation(Action.ADDRESSES)
    all_files = _operation(Action.ALL_FILES)
    all_messages = _operation(Action.ALL_MESSAGES)
    contact_files = _operation(Action.CONTACT_FILES)
    contact_messages = _operation(Action.CONTACT_MESSAGES)
    contact_search = _operation(Action.CONTACT_SEARCH)
    diff_summary = _operation(Action.DIFF_SUMMARY)
    file_revisions = _operation(Action.FILE_REVISIONS)
    related_files = _operation(Action.RELATED_FILES)
    file_search = _operation(Action.FILE_SEARCH)
    imap_account_info = _operation(Action.IMAP_ACCOUNT_INFO)
    imap_add_account = _operation(Action.IMAP_ADD_ACCOUNT)
    imap_discover = _operation(Action.IMAP_DISCOVER)
    imap_modify_account = _operation(Action.IMAP_MODIFY_ACCOUNT)
    imap_remove_account = _operation(Action.IMAP_REMOVE_ACCOUNT)
    imap_reset_status = _operation(Action.IMAP_RESET_STATUS)
    imap_get_oauth_providers = _operation(Action.IMAP_GET_OAUTH_PROVIDERS)
    imap_set_oauth_provider = _operation(Action.IMAP_SET_OAUTH_PROVIDER)
    imap_delete_oauth_provider = _operation(Action.IMAP_DELETE_OAUTH_PROVIDER)
    message_headers = _operation(Action.MESSAGE_HEADERS)
    message_info = _operation(Action.MESSAGE_INFO)
    message_text = _operation(Action.MESSAGE_TEXT)
    search = _operation(Action.SEARCH)
    thread_info = _operation(Action.THREAD_INFO)

    def download_file(
        self, account: str, params: Params = None, save_as: Union[str, Path, None] = None
    ):
        """Download an attachment. Not supported by this SDK."""
        raise NotImplementedOperationError(
            "downloadfile is not implemented", {"account": account}
        )


class BaseContextIO(ActionMethodsMixin):
    """Configuration, request preparation and response wrapping shared by both clients."""

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        api_version: str = DEFAULT_API_VERSION,
        ssl: bool = True,
        auth_headers: bool = False,
        save_headers: bool = False,
        timeout: int = 30,
        endpoint: str = DEFAULT_ENDPOINT,
        debug: bool = False,
    ):
        """
        Initialize the client with OAuth consumer credentials.

        Args:
            consumer_key: Context.IO OAuth consumer key
            consumer_secret: Context.IO OAuth consumer secret
            api_version: API version used in every URL
            ssl: Use HTTPS (default) or plain HTTP
            auth_headers: Send OAuth parameters in an Authorization header
                instead of the query string
            save_headers: Keep request and response headers on results
            timeout: HTTP request timeout in seconds
            endpoint: API host name
            debug: Enable debug logging
        """
        if not consumer_key or not consumer_secret:
            raise InvalidInputError("Consumer key and secret are required")

        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.api_version = api_version
        self.ssl = ssl
        self.auth_headers = auth_headers
        self.save_headers = save_headers
        self.timeout = timeout
        self.endpoint = endpoint

        if debug:
            setup_logging("DEBUG")
        self.logger = get_logger("client")

    @classmethod
    def from_settings(cls, settings: Optional[ContextIOSettings] = None, **overrides):
        """Create a client from ``CONTEXTIO_*`` environment settings."""
        settings = settings or get_settings()
        options = dict(
            consumer_key=settings.consumer_key,
            consumer_secret=settings.consumer_secret,
            api_version=settings.api_version,
            ssl=settings.ssl,
            auth_headers=settings.auth_headers,
            save_headers=settings.save_headers,
            timeout=settings.timeout,
            endpoint=settings.endpoint,
            debug=settings.debug,
        )
        options.update(overrides)
        return cls(**options)

    @property
    def api_version(self) -> str:
        return self._api_version

    @api_version.setter
    def api_version(self, value: str) -> None:
        if not value or not value.strip():
            raise InvalidInputError("API version cannot be empty")
        self._api_version = value.strip()

    @property
    def base_url(self) -> str:
        return build_base_url(self.ssl, self.endpoint, self.api_version)

    def build_url(self, action: str) -> str:
        """Return the full URL for an action path such as ``search.json``."""
        return build_action_url(self.ssl, self.endpoint, self.api_version, action)

    def _prepare(
        self, method: str, account: Optional[str], action: str, params: Params
    ) -> PreparedRequest:
        method = method.upper()
        if method not in ("GET", "POST"):
            raise InvalidInputError(f"Unsupported HTTP method: {method}")

        params = with_account(params or {}, account)
        url = self.build_url(action)
        body = None
        if method == "GET":
            url = append_query(url, params)
        else:
            body = encode_form(params)

        self.logger.debug("%s %s", method, url)

        signer = build_signer(self.consumer_key, self.consumer_secret, self.auth_headers)
        signed_url, signed_headers, signed_body = sign_request(signer, method, url, body)
        headers = {**build_default_headers(), **signed_headers}
        return method, signed_url, headers, signed_body

    def _prepare_action(
        self, action: Action, account: Optional[str], params: Params, extra: Mapping[str, str]
    ) -> PreparedRequest:
        spec = action.spec
        if account and not spec.scoped:
            raise InvalidInputError(f"{action.value} does not take an account")

        # Keyword arguments win over the params mapping regardless of key casing.
        filtered = {
            **filter_params(params, spec.allowed),
            **filter_params(extra, spec.allowed),
        }
        filtered = merge_fixed_params(filtered, spec.fixed)
        return self._prepare(spec.method, account, spec.path, filtered)

    def _wrap(self, response: httpx.Response) -> ContextIOResponse:
        result = build_response(response, self.save_headers)
        if result.has_error:
            self.logger.warning(
                "Context.IO responded %d (%s) for %s",
                result.code,
                result.content_type or "no content type",
                response.request.url.path,
            )
        return result


class ContextIO(BaseContextIO):
    """
    Blocking client for the Context.IO API.

    Every call returns a ``ContextIOResponse``, including rejected ones.

    Examples:
        >>> client = ContextIO("key", "secret")
        >>> response = client.all_messages("me@example.com", since="0")
        >>> print(response.body)

        Generic dispatch:
        >>> client.execute(Action.SEARCH, "me@example.com", {"subject": "report"})
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        http_client: Optional[httpx.Client] = None,
        **options,
    ):
        super().__init__(consumer_key, consumer_secret, **options)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=httpx.Timeout(self.timeout))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def request(
        self, method: str, account: Optional[str], action: str, params: Params = None
    ) -> ContextIOResponse:
        """Sign and send one call to an action path."""
        method, url, headers, body = self._prepare(method, account, action, params)
        return self._send(method, url, headers, body)

    def get(self, account: Optional[str], action: str, params: Params = None) -> ContextIOResponse:
        return self.request("GET", account, action, params)

    def post(self, account: Optional[str], action: str, params: Params = None) -> ContextIOResponse:
        return self.request("POST", account, action, params)

    def get_many(
        self, accounts: Sequence[str], action: str, params: Params = None
    ) -> List[ContextIOResponse]:
        """GET the same action for several accounts, in order."""
        return [self.get(account, action, params) for account in accounts]

    def execute(
        self,
        action: Action,
        account: Optional[str] = None,
        params: Params = None,
        **kwargs: str,
    ) -> ContextIOResponse:
        """Filter parameters against the action's allow-list and call it."""
        method, url, headers, body = self._prepare_action(action, account, params, kwargs)
        return self._send(method, url, headers, body)

    def _send(
        self, method: str, url: str, headers: Dict[str, str], body: Optional[str]
    ) -> ContextIOResponse:
        try:
            response = self._client.request(method, url, headers=headers, content=body)
        except httpx.HTTPError as e:
            raise map_transport_exception(e, url.split("?", 1)[0]) from e
        return self._wrap(response)


class AsyncContextIO(BaseContextIO):
    """Async client for the Context.IO API."""

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        http_client: Optional[httpx.AsyncClient] = None,
        **options,
    ):
        super().__init__(consumer_key, consumer_secret, **options)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def request(
        self, method: str, account: Optional[str], action: str, params: Params = None
    ) -> ContextIOResponse:
        method, url, headers, body = self._prepare(method, account, action, params)
        return await self._send(method, url, headers, body)

    async def get(
        self, account: Optional[str], action: str, params: Params = None
    ) -> ContextIOResponse:
        return await self.request("GET", account, action, params)

    async def post(
        self, account: Optional[str], action: str, params: Params = None
    ) -> ContextIOResponse:
        return await self.request("POST", account, action, params)

    async def get_many(
        self, accounts: Sequence[str], action: str, params: Params = None
    ) -> List[ContextIOResponse]:
        return list(
            await asyncio.gather(*(self.get(account, action, params) for account in accounts))
        )

    async def execute(
        self,
        action: Action,
        account: Optional[str] = None,
        params: Params = None,
        **kwargs: str,
    ) -> ContextIOResponse:
        method, url, headers, body = self._prepare_action(action, account, params, kwargs)
        return await self._send(method, url, headers, body)

    async def _send(
        self, method: str, url: str, headers: Dict[str, str], body: Optional[str]
    ) -> ContextIOResponse:
        try:
            response = await self._client.request(method, url, headers=headers, content=body)
        except httpx.HTTPError as e:
            raise map_transport_exception(e, url.split("?", 1)[0]) from e
        return self._wrap(response)
