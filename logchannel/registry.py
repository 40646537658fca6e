"""ChannelRegistry — owns every piece of per-topic configuration.

The registry maps topics to their suppression flag, decoration, priority
label, context string, bound sinks and live handle.  Tables are independent:
a topic can be decorated, disabled or routed before any channel for it
exists, and none of those settings is reset when a channel is (re)created.

Emission protocol
-----------------
1. A suppressed topic drops the message; nothing else happens.
2. The message is rendered once through the topic's decoration.
3. With sinks bound, each sink's ``accept(level, message)`` is called in
   binding order.  The first exception stops delivery and propagates.
4. With no sinks bound, the message goes to the default transmitter
   (standard error).

All tables are guarded by a single re-entrant lock.  Emission reads a
consistent view under the lock and delivers outside it, so a sink may itself
log through the registry.

Usage
-----
>>> from logchannel.sinks.memory import MemorySink
>>> registry = ChannelRegistry()
>>> log = registry.make_channel("app")
>>> registry.decorate("app", "topic: text\\n")
>>> sink = MemorySink()
>>> registry.dispatch("app", sink)
>>> log("hi")
>>> sink.messages
['app: hi\\n']
"""

from __future__ import annotations

import logging
import threading
import warnings
from typing import TYPE_CHECKING

from logchannel.channel import ChannelHandle
from logchannel.config import ChannelSettings
from logchannel.decoration import join_parts, render
from logchannel.errors import DuplicateChannelWarning, InvalidSinkError
from logchannel.models.status import ChannelStatus, RegistrySnapshot
from logchannel.sinks import is_sink, sink_label
from logchannel.sinks.stderr import StderrTransmitter
from logchannel.topics import caller_namespace, make_topic, qualify

if TYPE_CHECKING:
    from collections.abc import Iterable

    from logchannel.sinks import SinkAdapter

logger = logging.getLogger(__name__)


class ChannelRegistry:
    """Table of channels and their configuration.

    Parameters
    ----------
    settings:
        Defaults for priority, timestamp format and duplicate warnings.
        Loaded from the environment when omitted.
    transmitter:
        Fallback for topics without sinks.  Defaults to a
        ``StderrTransmitter``.
    """

    def __init__(
        self,
        settings: ChannelSettings | None = None,
        transmitter: StderrTransmitter | None = None,
    ) -> None:
        self._settings = settings or ChannelSettings()
        self._transmitter = transmitter or StderrTransmitter()
        self._lock = threading.RLock()

        self._suppressed: set[str] = set()
        self._decoration: dict[str, str] = {}
        self._priority: dict[str, str] = {}
        self._context: dict[str, str] = {}
        self._routing: dict[str, tuple[SinkAdapter, ...]] = {}
        self._channels: dict[str, ChannelHandle] = {}

    @property
    def settings(self) -> ChannelSettings:
        return self._settings

    @property
    def transmitter(self) -> StderrTransmitter:
        return self._transmitter

    # ------------------------------------------------------------------
    # Channel construction
    # ------------------------------------------------------------------

    def _register(self, topic: str, stacklevel: int) -> ChannelHandle:
        handle = ChannelHandle(topic, self)
        with self._lock:
            existing = topic in self._channels
            self._channels[topic] = handle
        if existing:
            logger.debug("Channel for '%s' re-created; replacing entry", topic)
            if self._settings.warn_on_duplicate:
                warnings.warn(
                    f"There is already an active channel for '{topic}'",
                    DuplicateChannelWarning,
                    stacklevel=stacklevel + 1,
                )
        else:
            logger.debug("Registered channel '%s'", topic)
        return handle

    def register_channel(self, topic: str, *, stacklevel: int = 1) -> ChannelHandle:
        """Create the channel for *topic*, replacing (with a warning) any existing one.

        *stacklevel* works as for ``warnings.warn``: it selects the frame the
        duplicate-channel warning is attributed to.
        """
        return self._register(topic, stacklevel=stacklevel + 1)

    make_channel = register_channel

    def new_channel(
        self,
        label: str | None = None,
        *,
        namespace: str | None = None,
        stacklevel: int = 1,
    ) -> ChannelHandle:
        """Create a channel named after the calling module.

        The topic is ``<namespace>`` or ``<namespace>::<label>``.  When
        *namespace* is not given it is the ``__name__`` of the caller.
        """
        if namespace is None:
            namespace = caller_namespace(stacklevel)
        return self._register(make_topic(namespace, label), stacklevel=stacklevel + 1)

    def channel(self, topic: str) -> ChannelHandle | None:
        """Return the live handle for *topic*, or ``None``."""
        with self._lock:
            return self._channels.get(topic)

    def msg(
        self, *parts: object, namespace: str | None = None, stacklevel: int = 1
    ) -> None:
        """Emit on the implicit channel of the caller's namespace.

        The channel is created on first use and reused afterwards, so every
        namespace has at most one implicit channel.
        """
        if namespace is None:
            namespace = caller_namespace(stacklevel)
        with self._lock:
            handle = self._channels.get(namespace)
            if handle is None:
                handle = self._register(namespace, stacklevel=stacklevel + 1)
        handle(*parts)

    # ------------------------------------------------------------------
    # Control and configuration
    # ------------------------------------------------------------------

    def disable(self, topic: str, *, namespace: str | None = None) -> None:
        """Stop transmission on *topic*.  Bound sinks are left open."""
        topic = qualify(topic, namespace)
        with self._lock:
            self._suppressed.add(topic)
        logger.debug("Disabled '%s'", topic)

    def enable(self, topic: str, *, namespace: str | None = None) -> None:
        """Restore transmission on *topic*."""
        topic = qualify(topic, namespace)
        with self._lock:
            self._suppressed.discard(topic)
        logger.debug("Enabled '%s'", topic)

    def is_enabled(self, topic: str, *, namespace: str | None = None) -> bool:
        topic = qualify(topic, namespace)
        with self._lock:
            return topic not in self._suppressed

    def decorate(
        self, topic: str, template: str, *, namespace: str | None = None
    ) -> None:
        """Set the decoration template for *topic*.  An empty string clears it."""
        topic = qualify(topic, namespace)
        with self._lock:
            if template:
                self._decoration[topic] = template
            else:
                self._decoration.pop(topic, None)

    def set_context(
        self, topic: str, value: str, *, namespace: str | None = None
    ) -> None:
        """Set the string substituted for ``context`` in *topic*'s decoration."""
        topic = qualify(topic, namespace)
        with self._lock:
            self._context[topic] = value

    def set_priority(
        self, topic: str, label: str, *, namespace: str | None = None
    ) -> None:
        """Set the priority label sent to sinks with every message on *topic*."""
        topic = qualify(topic, namespace)
        with self._lock:
            self._priority[topic] = str(label)

    def priority_of(self, topic: str) -> str:
        with self._lock:
            return self._priority.get(topic, self._settings.default_priority)

    def dispatch(
        self, topic: str, *sinks: SinkAdapter, namespace: str | None = None
    ) -> None:
        """Route *topic* to *sinks*, replacing any earlier routing.

        Every sink is validated before anything changes: if one lacks
        ``accept``, ``InvalidSinkError`` is raised and the previous routing
        stays in place.  Replaced sinks are not closed.  Passing no sinks
        sends *topic* back to the default transmitter.
        """
        for position, sink in enumerate(sinks):
            if not is_sink(sink):
                raise InvalidSinkError(sink, position)

        topic = qualify(topic, namespace)
        with self._lock:
            if sinks:
                self._routing[topic] = tuple(sinks)
            else:
                self._routing.pop(topic, None)
        logger.debug(
            "Routed '%s' to %s",
            topic,
            ", ".join(sink_label(s) for s in sinks) or "default transmitter",
        )

    def bind_sinks(
        self,
        topic: str,
        sinks: Iterable[SinkAdapter],
        *,
        namespace: str | None = None,
    ) -> None:
        """Route *topic* to the ordered sequence *sinks*; see ``dispatch``."""
        self.dispatch(topic, *sinks, namespace=namespace)

    def sinks_for(self, topic: str) -> tuple[SinkAdapter, ...]:
        with self._lock:
            return self._routing.get(topic, ())

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def emit(self, topic: str, *parts: object) -> None:
        """Deliver a message on *topic*; see the module docstring."""
        with self._lock:
            if topic in self._suppressed:
                return
            sinks = self._routing.get(topic, ())
            template = self._decoration.get(topic)
            context = self._context.get(topic)
            level = self._priority.get(topic, self._settings.default_priority)

        message = render(
            topic,
            template,
            context,
            join_parts(parts),
            timestamp_format=self._settings.timestamp_format,
        )

        if not sinks:
            self._transmitter.write(message)
            return
        for sink in sinks:
            sink.accept(level, message)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def status(self) -> None:
        """Reserved; returns nothing.  Use ``snapshot()`` for introspection."""
        return None

    def topics(self) -> list[str]:
        """Every topic mentioned in any table, sorted."""
        with self._lock:
            known = (
                set(self._channels)
                | self._suppressed
                | set(self._decoration)
                | set(self._priority)
                | set(self._context)
                | set(self._routing)
            )
        return sorted(known)

    def snapshot(self) -> RegistrySnapshot:
        """Return an immutable view of every topic's configuration."""
        with self._lock:
            channels = [
                ChannelStatus(
                    topic=topic,
                    enabled=topic not in self._suppressed,
                    has_handle=topic in self._channels,
                    decoration=self._decoration.get(topic),
                    priority=self._priority.get(
                        topic, self._settings.default_priority
                    ),
                    context=self._context.get(topic),
                    sinks=[sink_label(s) for s in self._routing.get(topic, ())],
                )
                for topic in self.topics()
            ]
        return RegistrySnapshot(channels=channels)

    def reset(self) -> None:
        """Forget every channel and setting.  Sinks are not closed."""
        with self._lock:
            self._suppressed.clear()
            self._decoration.clear()
            self._priority.clear()
            self._context.clear()
            self._routing.clear()
            self._channels.clear()
        logger.debug("Registry reset")


# ---------------------------------------------------------------------------
# Application-scoped default registry
# ---------------------------------------------------------------------------

_default_registry: ChannelRegistry | None = None
_default_lock = threading.Lock()


def get_registry() -> ChannelRegistry:
    """Return the application-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = ChannelRegistry()
        return _default_registry


def set_registry(registry: ChannelRegistry | None) -> ChannelRegistry | None:
    """Install *registry* as the application-wide one; returns the previous one.

    Passing ``None`` makes the next ``get_registry()`` build a fresh registry.
    """
    global _default_registry
    with _default_lock:
        previous, _default_registry = _default_registry, registry
    return previous
