"""Command-line entrypoint (Typer).

Single-dash names mirror the classic flag style (`-token`, `-patch`, ...);
the `--long` spellings are accepted as well.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from cli.ui_components import print_error, print_result
from core.config import AppSettings
from core.domain.models import GistOptions
from core.errors import ConfigurationError, GistError
from core.services.gist_pipeline import publish_gist

__version__ = "0.1.0"

app = typer.Typer(
    add_completion=False,
    help="Create or update a GitHub gist from stdin or files.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging(level: str | int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def load_settings(*, verbose: bool = False) -> AppSettings:
    """Read settings and set up logging, reporting bad values as `ConfigurationError`."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigurationError(f"invalid configuration: {details}") from exc

    try:
        configure_logging(logging.DEBUG if verbose else settings.log_level.upper())
    except ValueError as exc:
        raise ConfigurationError(f"invalid log level: {exc}") from exc
    return settings


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gistpost {__version__}")
        raise typer.Exit()


@app.command()
def post(
    files: Annotated[
        Optional[list[Path]],
        typer.Argument(help="Files to upload; reads stdin when none are given.", show_default=False),
    ] = None,
    token: Annotated[
        str,
        typer.Option("-token", "--token", help="Token (or use GIST_TOKEN or GITHUB_TOKEN environment variables)."),
    ] = "",
    description: Annotated[
        str,
        typer.Option("-description", "--description", help="Description of the gist."),
    ] = "",
    patch: Annotated[
        str,
        typer.Option("-patch", "--patch", help="Patch existing gist (gist id)."),
    ] = "",
    filename: Annotated[
        str,
        typer.Option("-filename", "--filename", help="Filename for content from stdin."),
    ] = "",
    public: Annotated[
        bool,
        typer.Option("-public", "--public", help="Make public gist."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("-verbose", "--verbose", "-v", help="Debug logging on stderr."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
) -> None:
    """Create a new gist, or update one with -patch."""

    options = GistOptions(
        token=token,
        description=description,
        patch=patch,
        filename=filename,
        public=public,
    )
    try:
        settings = load_settings(verbose=verbose)
        result = publish_gist(options, files or [], stdin=sys.stdin.buffer, settings=settings)
    except GistError as exc:
        logger.debug("aborting: %r", exc)
        print_error(_err_console, str(exc))
        raise typer.Exit(code=1) from exc

    print_result(_console, result)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
