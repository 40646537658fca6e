"""logchannel CLI — Typer-based command-line interface.

Provides the ``logchannel`` command with subcommands for inspecting a
routing profile, emitting test messages through it, and previewing
decorations.

All output uses Rich for formatted terminal display.
"""
