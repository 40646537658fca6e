"""``logchannel emit`` — send a message through a topic's channel.

Handy for checking a routing profile: the message goes wherever the
profile routes the topic, decorated the way the profile says.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from logchannel.cli.commands._common import build_registry
from logchannel.errors import ProfileError, SettingsError
from logchannel.profile import close_sinks

console = Console(stderr=True)


def emit_cmd(
    topic: str = typer.Argument(..., help="Topic to emit on."),
    message: list[str] = typer.Argument(..., help="Message fragments, joined with spaces."),
    profile: Path = typer.Option(
        None,
        "--profile",
        "-p",
        help="Routing profile (TOML). Defaults to LOGCHANNEL_PROFILE_PATH.",
    ),
    newline: bool = typer.Option(True, "--newline/--no-newline", help="Append a newline."),
) -> None:
    """Emit MESSAGE on TOPIC using the given routing profile."""
    try:
        registry, sinks = build_registry(profile)
    except ProfileError as exc:
        console.print(f"[red]Profile error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except SettingsError as exc:
        console.print(f"[red]Settings error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    try:
        channel = registry.channel(topic) or registry.register_channel(topic)
        text = " ".join(message)
        channel(text, "\n" if newline else "")
    finally:
        close_sinks(sinks)
