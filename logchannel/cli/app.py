"""Main Typer application — imports and registers all CLI commands.

Entry point: ``logchannel`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import typer

from logchannel.cli.commands.emit import emit_cmd
from logchannel.cli.commands.render import render_cmd
from logchannel.cli.commands.status_cmd import status_cmd

app = typer.Typer(
    name="logchannel",
    help="logchannel: named logging channels with deployer-controlled routing.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="status", help="Show channel configuration from a routing profile.")(status_cmd)
app.command(name="emit", help="Emit a message on a topic.")(emit_cmd)
app.command(name="render", help="Preview a decoration template.")(render_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
