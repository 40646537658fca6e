"""Helpers shared by CLI commands: settings, logging setup, profile loading."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from logchannel.config import ChannelSettings
from logchannel.errors import SettingsError
from logchannel.profile import apply_profile, load_profile
from logchannel.registry import ChannelRegistry
from logchannel.sinks import SinkAdapter


def load_settings() -> ChannelSettings:
    """Read ``LOGCHANNEL_*`` settings, turning validation failures into ``SettingsError``."""
    try:
        return ChannelSettings()
    except ValidationError as exc:
        raise SettingsError(f"Invalid LOGCHANNEL_* settings: {exc}") from exc


def configure_logging(settings: ChannelSettings) -> None:
    """Send the package's own diagnostics to stderr at the configured level.

    Only the ``logchannel`` logger is touched; the handler is added once.
    """
    package_logger = logging.getLogger("logchannel")
    package_logger.setLevel(settings.log_level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        )


def build_registry(
    profile: Path | None,
    settings: ChannelSettings | None = None,
) -> tuple[ChannelRegistry, list[SinkAdapter]]:
    """Create a registry and apply *profile* (or the settings' profile_path).

    Profiles are applied all-or-nothing; on ``ProfileError`` no sinks are
    left open.
    """
    settings = settings or load_settings()
    configure_logging(settings)
    registry = ChannelRegistry(settings=settings)
    path = profile or settings.profile_path
    sinks: list[SinkAdapter] = []
    if path is not None:
        sinks = apply_profile(registry, load_profile(path))
    return registry, sinks
