"""Routing profile models — declarative channel configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SinkSpec(BaseModel):
    """A single sink declaration inside a channel.

    ``type`` names an entry in the sink factory table
    (``stderr``, ``stream``, ``file``, ``memory``, ``logging``, ``console``).
    Every other key in the TOML table is passed to the factory as an option.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str
    enabled: bool = True

    @property
    def options(self) -> dict[str, Any]:
        """Factory keyword arguments: everything but ``type`` and ``enabled``."""
        return dict(self.model_extra or {})


class ChannelSpec(BaseModel):
    """Configuration for one topic.

    Fields left unset are not applied, so a profile can touch only the parts
    of a channel it cares about.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    topic: str
    enabled: bool | None = None
    decoration: str | None = None
    priority: str | None = None
    context: str | None = None
    sinks: list[SinkSpec] = Field(default_factory=list)

    @field_validator("topic")
    @classmethod
    def _topic_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("topic must not be empty")
        return value


class RoutingProfile(BaseModel):
    """A whole routing profile: one entry per configured topic."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    channels: list[ChannelSpec] = Field(default_factory=list)

    @property
    def topics(self) -> list[str]:
        return [channel.topic for channel in self.channels]
