"""minihttp CLI.

A naive httpie: `get` and `post` subcommands send one request and
pretty-print the response. Arguments are validated by Typer callbacks and parsers,
so bad input is a usage error (exit 2) and never reaches the network.
"""

from __future__ import annotations

import asyncio
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from cli.ui_components import print_response
from core.config import AppSettings
from core.domain.models import Command, GetCommand, KvPair, PostCommand
from core.errors import InvalidKvPair, InvalidUrl, MinihttpError
from core.logging import get_logger, setup_logging
from core.services.dispatcher import send
from core.validators import parse_kv, validate_url

__version__ = "1.0.0"

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="A naive httpie: send GET/POST requests and pretty-print the response.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"minihttp {__version__}")
        raise typer.Exit()


def _url_callback(value: str) -> str:
    try:
        return validate_url(value)
    except InvalidUrl as exc:
        raise typer.BadParameter(str(exc)) from exc


def _kv_parser(value: str) -> KvPair:
    try:
        return parse_kv(value)
    except InvalidKvPair as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO level (stderr)."),
    debug: bool = typer.Option(False, "--debug", "-d", help="Log at DEBUG level (stderr)."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """A naive httpie: send GET/POST requests and pretty-print the response."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(Text(f"Error: invalid configuration\n{exc}", style="red"))
        raise typer.Exit(code=1) from exc

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = settings.log_level
    setup_logging(level)
    ctx.obj = settings


def _run(command: Command, settings: AppSettings | None) -> None:
    try:
        response = asyncio.run(send(command, settings))
    except MinihttpError as exc:
        logger.debug("request aborted", error=str(exc))
        _err_console.print(Text(f"Error: {exc}", style="red"))
        raise typer.Exit(code=1) from exc
    print_response(_console, response)


@app.command()
def get(
    ctx: typer.Context,
    url: str = typer.Argument(..., callback=_url_callback, help="URL to request."),
) -> None:
    """Feed get with a URL and we will retrieve the response for you."""

    _run(GetCommand(url=url), ctx.obj)


@app.command()
def post(
    ctx: typer.Context,
    url: str = typer.Argument(..., callback=_url_callback, help="URL to request."),
    body: list[KvPair] | None = typer.Argument(
        None,
        parser=_kv_parser,
        metavar="[KEY=VALUE]...",
        help="Body fields, sent as a JSON object of strings.",
    ),
) -> None:
    """Feed post with a URL and optional key=value pairs.

    The pairs are posted as JSON and the response is printed.
    """

    _run(PostCommand(url=url, body=list(body or [])), ctx.obj)


def run() -> None:
    """Console-script entry point."""

    app()
