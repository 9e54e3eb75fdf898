"""CLI output components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- The raw API body is written verbatim (no markup, no wrapping).
"""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.text import Text

from core.domain.models import GistResponse, PublishResult


def format_created_at(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d %H:%M:%S %z %Z")


def build_summary(gist: GistResponse) -> Text:
    """Three labeled lines: id, html url, creation date."""

    text = Text()
    text.append("  ID:    ")
    text.append(gist.id, style="bold cyan")
    text.append("\n  HTML:  ")
    text.append(gist.html_url, style="magenta")
    text.append("\n  Date:  ")
    text.append(format_created_at(gist.created_at), style="dim")
    return text


def print_result(console: Console, result: PublishResult) -> None:
    if result.ok:
        console.print(build_summary(result.gist), soft_wrap=True, highlight=False)
        return

    console.print(
        f"Gist might have not been created, response status code: {result.status_code}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    stream = console.file
    stream.write(result.body.decode("utf-8", errors="replace"))
    stream.write("\n")
    stream.flush()


def print_error(console: Console, message: str) -> None:
    text = Text()
    text.append("error: ", style="bold red")
    text.append(message)
    console.print(text, soft_wrap=True, highlight=False)
