"""``logchannel render`` — preview a decoration template."""

from __future__ import annotations

import typer
from rich.console import Console

from logchannel.cli.commands._common import load_settings
from logchannel.decoration import render
from logchannel.errors import SettingsError

console = Console(stderr=True)


def render_cmd(
    template: str = typer.Argument(..., help="Decoration template, e.g. 'topic: text'."),
    topic: str = typer.Option("__main__", "--topic", "-t", help="Topic to render."),
    context: str = typer.Option("", "--context", "-c", help="Context string."),
    text: str = typer.Option("example message", "--text", help="Message text."),
) -> None:
    """Print TEMPLATE rendered for a sample message."""
    try:
        settings = load_settings()
    except SettingsError as exc:
        console.print(f"[red]Settings error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(
        render(
            topic,
            template,
            context,
            text,
            timestamp_format=settings.timestamp_format,
        )
    )
