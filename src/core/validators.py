"""Argument validators for the URL and `key=value` tokens.

Both run at CLI-parse time, before any network activity.
"""

from __future__ import annotations

import httpx

from core.domain.models import KvPair
from core.errors import InvalidKvPair, InvalidUrl


def validate_url(url: str) -> str:
    """Check that `url` is an absolute URL and return it unchanged."""

    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidUrl(url, str(exc)) from exc

    if not parsed.scheme:
        raise InvalidUrl(url, "missing scheme")
    if not parsed.host:
        raise InvalidUrl(url, "missing host")
    return url


def parse_kv(token: str) -> KvPair:
    """Parse a `key=value` token.

    Only the first two fields of the split are kept: `a=b=c` gives
    `key="a", value="b"`.
    """

    fields = token.split("=")
    if len(fields) < 2:
        raise InvalidKvPair(token)
    return KvPair(key=fields[0], value=fields[1])
