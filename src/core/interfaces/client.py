"""HTTP client contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Lets the dispatcher run against the httpx adapter or a test double.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

import httpx


@runtime_checkable
class HTTPClient(Protocol):
    """Minimal client surface used by the dispatcher.

    Design rules:
    - Both calls are async because they do network I/O.
    - Transport failures surface as `core.errors.TransportError`.
    """

    async def get(self, url: str) -> httpx.Response:
        """Send a GET with no body."""

        ...

    async def post(self, url: str, body: Mapping[str, str]) -> httpx.Response:
        """Send `body` as a JSON object."""

        ...
