"""Command dispatch.

Maps the parsed `Command` to exactly one client call. Printing stays in the
CLI layer, so the flow is reusable from tests without a terminal.
"""

from __future__ import annotations

import httpx

from adapters.http_client import HttpieClient, build_async_client
from core.config import AppSettings
from core.domain.models import Command, GetCommand, PostCommand, body_map
from core.interfaces.client import HTTPClient


async def dispatch(command: Command, client: HTTPClient) -> httpx.Response:
    """Send the request described by `command`."""

    if isinstance(command, GetCommand):
        return await client.get(command.url)
    if isinstance(command, PostCommand):
        return await client.post(command.url, body_map(command.body))
    raise TypeError(f"Unsupported command: {command!r}")


async def send(
    command: Command,
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    """Open the process-wide client, send `command` and return the response.

    The body is fully read before the client closes.
    """

    async with build_async_client(settings, transport=transport) as http:
        return await dispatch(command, HttpieClient(http))
