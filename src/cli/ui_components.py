"""Response rendering (Rich).

Why separate components:
- Keeps command wiring apart from visual details.
- Every part (status, headers, body) can be printed and tested on its own.

The syntax theme and lexers are loaded once at import time and shared by
every render.
"""

from __future__ import annotations

import httpx
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from rich.console import Console
from rich.syntax import Syntax, SyntaxTheme
from rich.text import Text

from core.domain.content_type import ContentKind, parse_media_type
from core.errors import ContentTypeDecodeError, HeaderDecodeError
from core.logging import get_logger

logger = get_logger(__name__)

SYNTAX_THEME: SyntaxTheme = Syntax.get_theme("monokai")
LEXERS: dict[ContentKind, Lexer] = {
    ContentKind.JSON: get_lexer_by_name("json"),
    ContentKind.HTML: get_lexer_by_name("html"),
}


def print_status(console: Console, response: httpx.Response) -> None:
    status = f"{response.status_code} {response.reason_phrase}".rstrip()
    if response.is_client_error or response.is_server_error:
        console.print(Text(status, style="red"))
        return
    console.print(Text(f"{response.http_version} {status}", style="green"))
    console.print()


def decode_header_value(name: str, raw: bytes) -> str:
    """Decode a raw header value as UTF-8, raising `HeaderDecodeError`."""

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise HeaderDecodeError(name, raw) from exc


def print_headers(console: Console, response: httpx.Response) -> None:
    """Print every header in received order, then a blank line.

    Values that are not valid text are shown with the offending bytes escaped.
    """

    for raw_name, raw_value in response.headers.raw:
        name = raw_name.decode("latin-1")
        try:
            value = decode_header_value(name, raw_value)
        except HeaderDecodeError as exc:
            logger.warning("undecodable header value", header=exc.name)
            value = raw_value.decode("utf-8", errors="backslashreplace")
        console.print(Text.assemble((name, "green"), ": ", value), soft_wrap=True)
    console.print()


def content_kind(response: httpx.Response) -> ContentKind:
    """Pick the body renderer from the response Content-Type."""

    value = response.headers.get("content-type")
    if value is None:
        return ContentKind.PLAIN
    try:
        media_type = parse_media_type(value)
    except ContentTypeDecodeError as exc:
        logger.warning("unparseable content type", content_type=exc.value)
        return ContentKind.PLAIN
    return ContentKind.from_media_type(media_type)


def print_body(console: Console, kind: ContentKind, body: str) -> None:
    """Print the body, highlighted for JSON/HTML, in cyan otherwise.

    The text is rendered exactly as received; numbers and duplicate keys in
    a JSON body are never rewritten.
    """

    if kind is ContentKind.PLAIN:
        console.print(Text(body, style="cyan"), soft_wrap=True)
        return

    console.print(Syntax(body, LEXERS[kind], theme=SYNTAX_THEME), soft_wrap=True)


def print_response(console: Console, response: httpx.Response) -> None:
    """Render status line, headers and body, in that order."""

    print_status(console, response)
    print_headers(console, response)
    print_body(console, content_kind(response), response.text)
