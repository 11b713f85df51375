"""httpx wrapper.

Why a wrapper:
- Standardizes default headers, timeout policy and logging for the one
  request the tool sends.
- Eases testing: a `httpx.MockTransport` can be plugged in.
"""

from __future__ import annotations

from typing import Mapping

import httpx

from core.config import AppSettings
from core.errors import TransportError
from core.logging import get_logger

logger = get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the `httpx.AsyncClient` with the default header set.

    Why a builder:
    - Centralizes headers/timeouts so every request behaves the same.
    - `transport` is the seam used by tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "X-POWERED-BY": settings.powered_by,
        "User-Agent": settings.user_agent,
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )


class HttpieClient:
    """Sends GET/POST requests through a shared `httpx.AsyncClient`."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get(self, url: str) -> httpx.Response:
        return await self._send("GET", url)

    async def post(self, url: str, body: Mapping[str, str]) -> httpx.Response:
        return await self._send("POST", url, json=dict(body))

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        logger.debug("request sent", method=method, url=url)
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            logger.info("transport failure", method=method, url=url, error=str(exc))
            raise TransportError(method, url, exc) from exc

        logger.debug(
            "response received",
            method=method,
            url=url,
            status=response.status_code,
            http_version=response.http_version,
        )
        return response
