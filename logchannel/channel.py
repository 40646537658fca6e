"""ChannelHandle — the callable that emitting code holds on to.

A handle is bound to one topic when it is created and carries nothing else.
Suppression, decoration, context, priority and routing all live in the
registry and are read on every call, so configuration applied after the
handle was handed out still takes effect.

Suggested usage::

    log = registry.new_channel("queries")
    log("SELECT took ", elapsed, "ms\\n")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from logchannel.registry import ChannelRegistry


class ChannelHandle:
    """Immutable binding of a topic to a registry."""

    __slots__ = ("_topic", "_registry")

    def __init__(self, topic: str, registry: ChannelRegistry) -> None:
        object.__setattr__(self, "_topic", topic)
        object.__setattr__(self, "_registry", registry)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def registry(self) -> ChannelRegistry:
        return self._registry

    @property
    def enabled(self) -> bool:
        return self._registry.is_enabled(self._topic)

    def __call__(self, *parts: object) -> None:
        """Emit the concatenation of *parts* on this channel."""
        self._registry.emit(self._topic, *parts)

    def __repr__(self) -> str:
        return f"<ChannelHandle topic={self._topic!r}>"
