"""Content-Type handling.

Maps the declared media type of a response body to the renderer the CLI
should use. Only the essence (`type/subtype`) matters; parameters such as
`charset` are ignored.
"""

from __future__ import annotations

import re
from enum import Enum

from core.errors import ContentTypeDecodeError

# RFC 7230 token characters.
_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_MEDIA_TYPE_RE = re.compile(rf"^\s*({_TOKEN})/({_TOKEN})\s*(?:;.*)?$", re.DOTALL)


class ContentKind(str, Enum):
    """How a response body is rendered."""

    JSON = "json"
    HTML = "html"
    PLAIN = "plain"

    @classmethod
    def from_media_type(cls, media_type: str | None) -> "ContentKind":
        """Pick the renderer for an already parsed essence (or None)."""

        if media_type == "application/json":
            return cls.JSON
        if media_type == "text/html":
            return cls.HTML
        return cls.PLAIN


def parse_media_type(value: str) -> str:
    """Return the lower-cased `type/subtype` of a Content-Type header value.

    Raises `ContentTypeDecodeError` when the value is not a media type.
    """

    match = _MEDIA_TYPE_RE.match(value)
    if match is None:
        raise ContentTypeDecodeError(value)
    return f"{match.group(1)}/{match.group(2)}".lower()
