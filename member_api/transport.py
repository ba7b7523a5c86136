"""
HTTP transport for the member/auth service.

``HttpTransport`` is the interface the client depends on; ``HttpxTransport``
is the concrete implementation on top of ``httpx.AsyncClient``. Base URL,
default headers, timeout and cookie policy are configured here once, so the
client never deals with them.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol

import httpx
import logfire

from member_api.config import DEFAULT_TIMEOUT, Settings

logger = logging.getLogger("member_api.transport")

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass
class TransportResponse:
    data: Any
    status_code: int = 200
    headers: httpx.Headers = field(default_factory=httpx.Headers)


class HttpTransport(Protocol):
    async def get(self, path: str) -> TransportResponse: ...

    async def post(self, path: str, body: Optional[Mapping[str, Any]] = None) -> TransportResponse: ...


def _parse_body(response: httpx.Response) -> Any:
    """Decoded JSON when possible, raw text otherwise, None for an empty body."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpxTransport:
    """
    ``httpx.AsyncClient`` wrapper used as the member API transport.

    Pass ``client`` to reuse an existing AsyncClient. Its own base URL,
    headers and timeout are then used as they are: ``base_url`` is only kept
    for reference, ``timeout`` is ignored, and ``headers`` or
    ``http_transport`` are rejected.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        with_credentials: bool = True,
        headers: Optional[Mapping[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not base_url:
            raise ValueError("HttpxTransport requires a base_url")
        if client is not None and (headers or http_transport is not None):
            raise ValueError("headers and http_transport cannot be combined with an injected client")

        self.base_url = base_url.rstrip("/")
        self.with_credentials = with_credentials

        # An injected client belongs to the caller and is left open on aclose()
        self._owns_client = client is None
        if client is None:
            merged_headers = dict(DEFAULT_HEADERS)
            if headers:
                merged_headers.update(headers)
            client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=merged_headers,
                timeout=timeout,
                transport=http_transport,
            )
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "HttpxTransport":
        return cls(
            base_url=settings.base_url,
            timeout=settings.timeout,
            with_credentials=settings.with_credentials,
            **kwargs,
        )

    async def get(self, path: str) -> TransportResponse:
        return await self._request("GET", path)

    async def post(self, path: str, body: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        return await self._request("POST", path, body)

    async def _request(self, method: str, path: str, body: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        with logfire.span("member_api_request", method=method, path=path):
            logger.debug("%s %s", method, path)
            try:
                response = await self._client.request(
                    method,
                    path,
                    json=dict(body) if body is not None else None,
                )
            except httpx.RequestError as e:
                logger.error("%s %s failed: %s", method, path, e)
                raise

            if not self.with_credentials:
                self._client.cookies.clear()

            logger.debug("%s %s -> %s", method, path, response.status_code)
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError:
                logger.warning("%s %s returned %s: %s", method, path, response.status_code, response.text)
                raise

            return TransportResponse(
                data=_parse_body(response),
                status_code=response.status_code,
                headers=response.headers,
            )

    async def aclose(self):
        """Close the connection pool if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
