"""Registry snapshot models used for introspection and CLI display."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class ChannelStatus(BaseModel):
    """Point-in-time view of one topic's configuration."""

    model_config = ConfigDict(frozen=True)

    topic: str
    enabled: bool = True
    has_handle: bool = False
    decoration: str | None = None
    priority: str
    context: str | None = None
    sinks: list[str] = Field(default_factory=list)

    @property
    def destination(self) -> str:
        """Where messages currently go: sink names, stderr, or nowhere."""
        if not self.enabled:
            return "(suppressed)"
        if self.sinks:
            return ", ".join(self.sinks)
        return "stderr (default)"


class RegistrySnapshot(BaseModel):
    """Every topic known to a registry, sorted by topic."""

    model_config = ConfigDict(frozen=True)

    channels: list[ChannelStatus] = Field(default_factory=list)
    taken_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def get(self, topic: str) -> ChannelStatus | None:
        for channel in self.channels:
            if channel.topic == topic:
                return channel
        return None
