"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from toys.config import DEFAULT_TIMEOUT
from toys.exceptions import (
    DecodeError,
    ToysAPIError,
    ToysConnectionError,
    ToysTimeoutError,
    TransportError,
)

Params = dict[str, str] | None


def _check_status(response: httpx.Response) -> httpx.Response:
    """Raise ToysAPIError for error status codes."""
    if response.status_code >= 400:
        raise ToysAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    return response


def _parse_json(response: httpx.Response) -> Any:
    """Return the decoded JSON body, raising DecodeError if it is not JSON."""
    try:
        return response.json()
    except ValueError as exc:
        raise DecodeError(f"Response from {response.url} is not valid JSON: {exc}") from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client.

    Build one per process and hand it to every resolver that needs it. An
    existing ``httpx.Client`` may be injected; it is then left open on close().
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    def __enter__(self) -> SyncTransport:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _send(self, url: str, params: Params) -> httpx.Response:
        try:
            response = self._client.get(url, params=params)
        except httpx.ConnectError as exc:
            raise ToysConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise ToysTimeoutError(str(exc)) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc)) from exc
        return _check_status(response)

    def get_json(self, url: str, params: Params = None) -> Any:
        """Perform a GET request and return the parsed JSON body."""
        return _parse_json(self._send(url, params))

    def get_text(self, url: str, params: Params = None) -> str:
        """Perform a GET request and return the raw body text."""
        return self._send(url, params).text

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    async def __aenter__(self) -> AsyncTransport:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def _send(self, url: str, params: Params) -> httpx.Response:
        try:
            response = await self._client.get(url, params=params)
        except httpx.ConnectError as exc:
            raise ToysConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise ToysTimeoutError(str(exc)) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc)) from exc
        return _check_status(response)

    async def get_json(self, url: str, params: Params = None) -> Any:
        """Perform an async GET request and return the parsed JSON body."""
        return _parse_json(await self._send(url, params))

    async def get_text(self, url: str, params: Params = None) -> str:
        """Perform an async GET request and return the raw body text."""
        return (await self._send(url, params)).text

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
