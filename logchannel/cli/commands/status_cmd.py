"""``logchannel status`` — show how a routing profile configures each topic."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from logchannel.cli.commands._common import build_registry
from logchannel.errors import ProfileError, SettingsError
from logchannel.models.status import RegistrySnapshot
from logchannel.profile import close_sinks

console = Console()


def build_status_table(snapshot: RegistrySnapshot) -> Table:
    """Render a snapshot as a Rich table, one row per topic."""
    table = Table(title="Channels", header_style="bold cyan", expand=True)
    table.add_column("Topic", style="cyan", no_wrap=True)
    table.add_column("Enabled", justify="center")
    table.add_column("Priority")
    table.add_column("Decoration")
    table.add_column("Context")
    table.add_column("Destination")

    for channel in snapshot.channels:
        enabled = "[green]Yes[/green]" if channel.enabled else "[red]No[/red]"
        table.add_row(
            channel.topic,
            enabled,
            channel.priority,
            repr(channel.decoration) if channel.decoration is not None else "[dim]-[/dim]",
            channel.context or "[dim]-[/dim]",
            channel.destination,
        )
    return table


def status_cmd(
    profile: Path = typer.Option(
        None,
        "--profile",
        "-p",
        help="Routing profile (TOML). Defaults to LOGCHANNEL_PROFILE_PATH.",
    ),
) -> None:
    """Apply a routing profile to an empty registry and list the result."""
    try:
        registry, sinks = build_registry(profile)
    except ProfileError as exc:
        console.print(f"[red]Profile error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except SettingsError as exc:
        console.print(f"[red]Settings error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    try:
        snapshot = registry.snapshot()
        if not snapshot.channels:
            console.print("[dim]No channels configured.[/dim]")
            return
        table = build_status_table(snapshot)
        table.caption = f"Default priority: {registry.settings.default_priority}"
        console.print(table)
    finally:
        close_sinks(sinks)
