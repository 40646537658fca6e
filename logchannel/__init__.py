"""logchannel: named logging channels with deployer-controlled routing.

Library code emits to channels without knowing where messages end up::

    import logchannel

    log = logchannel.new_channel("queries")     # topic "<module>::queries"
    log("this goes to stderr by default\\n")
    logchannel.msg("so does this, on the '<module>' channel\\n")

Whoever deploys the code decides what happens to them::

    logchannel.decorate("myapp.db::queries", "timestamp topic: text\\n")
    logchannel.set_priority("myapp.db::queries", "debug")
    logchannel.dispatch("myapp.db::queries", FileSink("queries.log"))
    logchannel.disable("myapp.db")

The functions in this module operate on the application-wide registry
returned by ``get_registry()``.  Tests and embedding applications can build
their own ``ChannelRegistry`` instead, or swap one in with ``set_registry``.
"""

from __future__ import annotations

from logchannel.channel import ChannelHandle
from logchannel.config import ChannelSettings
from logchannel.errors import (
    ChannelError,
    DuplicateChannelWarning,
    InvalidSinkError,
    ProfileError,
    SettingsError,
)
from logchannel.models.status import RegistrySnapshot
from logchannel.registry import ChannelRegistry, get_registry, set_registry
from logchannel.sinks import SinkAdapter

__version__ = "0.4.0"


def new_channel(label: str | None = None, *, namespace: str | None = None) -> ChannelHandle:
    """Create a channel for the calling module, optionally suffixed with *label*."""
    return get_registry().new_channel(label, namespace=namespace, stacklevel=2)


def make_channel(topic: str) -> ChannelHandle:
    """Create a channel for an explicit *topic*."""
    return get_registry().register_channel(topic, stacklevel=2)


def msg(*parts: object, namespace: str | None = None) -> None:
    """Emit on the implicit channel of the calling module."""
    get_registry().msg(*parts, namespace=namespace, stacklevel=2)


def enable(topic: str, *, namespace: str | None = None) -> None:
    get_registry().enable(topic, namespace=namespace)


def disable(topic: str, *, namespace: str | None = None) -> None:
    get_registry().disable(topic, namespace=namespace)


def decorate(topic: str, template: str, *, namespace: str | None = None) -> None:
    get_registry().decorate(topic, template, namespace=namespace)


def set_context(topic: str, value: str, *, namespace: str | None = None) -> None:
    get_registry().set_context(topic, value, namespace=namespace)


def set_priority(topic: str, label: str, *, namespace: str | None = None) -> None:
    get_registry().set_priority(topic, label, namespace=namespace)


def dispatch(topic: str, *sinks: SinkAdapter, namespace: str | None = None) -> None:
    get_registry().dispatch(topic, *sinks, namespace=namespace)


def status() -> None:
    """Reserved entry point; returns nothing."""
    return get_registry().status()


def snapshot() -> RegistrySnapshot:
    return get_registry().snapshot()


__all__ = [
    "ChannelError",
    "ChannelHandle",
    "ChannelRegistry",
    "ChannelSettings",
    "DuplicateChannelWarning",
    "InvalidSinkError",
    "ProfileError",
    "RegistrySnapshot",
    "SettingsError",
    "SinkAdapter",
    "__version__",
    "decorate",
    "disable",
    "dispatch",
    "enable",
    "get_registry",
    "make_channel",
    "msg",
    "new_channel",
    "set_context",
    "set_priority",
    "set_registry",
    "snapshot",
    "status",
]
