"""Thin transport: execute serialized requests over httpx.

No retries and no rate limiting happen here; a failed call raises and the
caller decides what to do.
"""

from __future__ import annotations

from typing import Any

import httpx

from .config import DEFAULT_API_URL
from .errors import TransportError
from .logging import get_logger
from .requests import HttpRequest, Request

logger = get_logger(__name__)


class HttpxConnector:
    def __init__(
        self,
        *,
        timeout_s: float = 120,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(timeout=timeout_s)
        self._owns_client = client is None

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def execute(self, base: str, request: HttpRequest) -> bytes:
        method = request.url.name
        try:
            resp = await self._client.request(
                request.method.value,
                request.url.build(base),
                content=request.body.data,
                headers={"Content-Type": request.body.content_type},
            )
        except httpx.HTTPError as e:
            logger.error(
                "api.network_error",
                method=method,
                error=str(e),
                error_type=e.__class__.__name__,
            )
            raise TransportError(method, str(e)) from e

        if resp.status_code >= 400:
            # the API still answers with an error envelope; let the decoder report it
            logger.warning("api.http_error", method=method, status=resp.status_code)
        return resp.content


class Api:
    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout_s: float = 120,
        client: httpx.AsyncClient | None = None,
        connector: HttpxConnector | None = None,
    ) -> None:
        if not token:
            raise ValueError("Telegram token is empty")
        self._base = f"{api_url.rstrip('/')}/bot{token}"
        self._connector = connector or HttpxConnector(timeout_s=timeout_s, client=client)

    async def close(self) -> None:
        await self._connector.close()

    async def __aenter__(self) -> Api:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def send(self, request: Request) -> Any:
        http_request = request.serialize()
        logger.debug("api.request", method=http_request.url.name)
        body = await self._connector.execute(self._base, http_request)
        result = request.response_type.deserialize(body)
        logger.debug("api.response", method=http_request.url.name)
        return result
