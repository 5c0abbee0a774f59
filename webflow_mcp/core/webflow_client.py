"""Async Webflow Data API client."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AsyncExitStack
from types import TracebackType
from typing import Any, Protocol
from urllib.parse import quote

import httpx
from pydantic import SecretStr
from pydantic import ValidationError as PydanticValidationError

from .config import WebflowSettings
from .exceptions import ProviderError, RateLimitExceeded
from .http_client import async_http_client
from .logging_config import get_logger
from .models import CollectionList, Site, SiteList

logger = get_logger(__name__)


class WebflowProvider(Protocol):
    """Account-data operations the tool handlers depend on."""

    async def __aenter__(self) -> WebflowProvider: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def get_site(self, site_id: str) -> Site | None: ...

    async def list_sites(self) -> SiteList: ...

    async def list_collections(self, site_id: str) -> CollectionList: ...


ProviderFactory = Callable[[], WebflowProvider]


class WebflowClient:
    """Minimal async client for the read-only Webflow endpoints.

    One instance owns one ``httpx.AsyncClient`` for the duration of an
    ``async with`` block; it is not meant to be shared between tool calls.
    """

    DEFAULT_BASE_URL = "https://api.webflow.com/v2/"

    def __init__(
        self,
        access_token: SecretStr | str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if isinstance(access_token, str):
            access_token = SecretStr(access_token)
        self._access_token = access_token
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._timeout = timeout
        self._transport = transport
        self._stack: AsyncExitStack | None = None
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> WebflowClient:
        stack = AsyncExitStack()
        self._http = await stack.enter_async_context(
            async_http_client(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={
                    "Authorization": f"Bearer {self._access_token.get_secret_value()}",
                    "Accept": "application/json",
                },
                transport=self._transport,
            )
        )
        self._stack = stack
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        stack, self._stack, self._http = self._stack, None, None
        if stack is not None:
            await stack.aclose()

    async def _request(self, method: str, path: str) -> httpx.Response:
        if self._http is None:
            raise RuntimeError("WebflowClient must be used as an async context manager")

        try:
            response = await self._http.request(method.upper(), path)
        except httpx.HTTPError as exc:
            logger.warning("webflow_http_error", method=method.upper(), path=path, error=str(exc))
            raise ProviderError(f"Webflow request failed: {exc}") from exc

        logger.debug(
            "webflow_http_response",
            method=method.upper(),
            path=path,
            status_code=response.status_code,
        )
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if not response.is_error:
            return

        code: str | None = None
        message = response.text or response.reason_phrase
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            code = payload.get("code")
            message = payload.get("message") or message

        detail = f"Webflow responded with {response.status_code}: {message}"
        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            raise RateLimitExceeded(detail, status_code=response.status_code, code=code)
        raise ProviderError(detail, status_code=response.status_code, code=code)

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(
                "Webflow returned a non-JSON payload", status_code=response.status_code
            ) from exc

    async def get_site(self, site_id: str) -> Site | None:
        """Fetch a single site; ``None`` when Webflow reports it does not exist."""

        response = await self._request("GET", f"sites/{quote(site_id, safe='')}")
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        self._raise_for_status(response)

        payload = self._json(response)
        if not payload:
            return None
        try:
            return Site.model_validate(payload)
        except PydanticValidationError as exc:
            raise ProviderError(f"Unexpected site payload: {exc}") from exc

    async def list_sites(self) -> SiteList:
        """List every site the token can access."""

        response = await self._request("GET", "sites")
        self._raise_for_status(response)
        return self._parse_list(SiteList, self._json(response))

    async def list_collections(self, site_id: str) -> CollectionList:
        """List CMS collections of a site."""

        response = await self._request("GET", f"sites/{quote(site_id, safe='')}/collections")
        self._raise_for_status(response)
        return self._parse_list(CollectionList, self._json(response))

    @staticmethod
    def _parse_list(model: type[SiteList] | type[CollectionList], payload: Any) -> Any:
        if not isinstance(payload, dict):
            return model()
        try:
            return model.model_validate(payload)
        except PydanticValidationError as exc:
            raise ProviderError(f"Unexpected {model.__name__} payload: {exc}") from exc


def webflow_client_factory(settings: WebflowSettings) -> ProviderFactory:
    """Return a factory building a fresh WebflowClient per tool call."""

    def factory() -> WebflowClient:
        return WebflowClient(
            settings.webflow_api_token,
            base_url=str(settings.webflow_api_base),
            timeout=settings.webflow_http_timeout,
        )

    return factory
