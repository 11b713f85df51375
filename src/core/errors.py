"""Error taxonomy.

Every failure the tool can report derives from `MinihttpError`, so the CLI
has a single place to turn them into a diagnostic and an exit code.
"""

from __future__ import annotations


class MinihttpError(Exception):
    """Base class for all minihttp errors."""


class InvalidUrl(MinihttpError, ValueError):
    """The URL argument is not a well-formed absolute URL."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        self.url = url
        self.reason = reason
        message = f"Invalid URL {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidKvPair(MinihttpError, ValueError):
    """A body token is not of the form `key=value`."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Failed to parse {token!r}, expected key=value")


class TransportError(MinihttpError):
    """The request never produced a response (DNS, connect, TLS, timeout)."""

    def __init__(self, method: str, url: str, cause: Exception) -> None:
        self.method = method
        self.url = url
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"{method} {url} failed: {detail}")


class HeaderDecodeError(MinihttpError):
    """A response header value is not valid text."""

    def __init__(self, name: str, raw: bytes) -> None:
        self.name = name
        self.raw = raw
        super().__init__(f"Header {name!r} is not valid UTF-8")


class ContentTypeDecodeError(MinihttpError):
    """The Content-Type header is present but not a parseable media type."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Cannot parse Content-Type {value!r}")
