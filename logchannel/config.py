"""Runtime settings — env-driven, via pydantic-settings.

Reads ``LOGCHANNEL_*`` environment variables and an optional ``.env`` file.

Examples
--------
Override via environment::

    export LOGCHANNEL_DEFAULT_PRIORITY=notice
    export LOGCHANNEL_TIMESTAMP_FORMAT="%Y-%m-%d %H:%M:%S"
    export LOGCHANNEL_PROFILE_PATH=/etc/myapp/channels.toml
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logchannel.models.priority import DEFAULT_PRIORITY

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ChannelSettings(BaseSettings):
    """Settings shared by every ``ChannelRegistry`` and by the CLI."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LOGCHANNEL_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Label sent to sinks for topics with no explicit priority
    default_priority: str = DEFAULT_PRIORITY
    # strftime format for the ``timestamp`` keyword; None means ctime form
    timestamp_format: str | None = None
    warn_on_duplicate: bool = True

    # CLI
    profile_path: Path | None = None
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            )
        return level
