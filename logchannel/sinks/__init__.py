"""Sink protocol for logchannel routing.

A sink is any object with an ``accept(level, message)`` method.  Channels
with bound sinks call ``accept`` on every one of them, in binding order,
for every message.  Nothing else is required; the bundled sinks also carry
a ``sink_name`` property so they read well in status output.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SinkAdapter(Protocol):
    """Protocol every logchannel sink must satisfy.

    The registry holds sinks by reference and never closes them.  Whoever
    creates a sink owns it.
    """

    def accept(self, level: str, message: str) -> None:
        """Deliver one fully rendered *message* at priority *level*.

        Exceptions propagate to the code that emitted the message.
        """
        ...


def is_sink(candidate: object) -> bool:
    """Return ``True`` if *candidate* has a callable ``accept`` attribute."""
    return callable(getattr(candidate, "accept", None))


def sink_label(sink: object) -> str:
    """Human-readable name for *sink*: its ``sink_name`` or its class name."""
    name = getattr(sink, "sink_name", None)
    if isinstance(name, str) and name:
        return name
    return type(sink).__name__


__all__ = ["SinkAdapter", "is_sink", "sink_label"]
