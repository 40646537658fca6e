"""Routing profiles — configure channels from a TOML file.

A profile lets a deployer bind topics to sinks, set decorations, priorities
and contexts, and switch topics off, without touching the emitting code::

    [[channels]]
    topic = "myapp.db::queries"
    decoration = "[timestamp] topic: text\\n"
    priority = "debug"

      [[channels.sinks]]
      type = "file"
      path = "queries.log"

Sink ``type`` values resolve through ``SINK_FACTORIES``; applications can
add their own with ``register_sink_factory``.
"""

from __future__ import annotations

import logging
import sys
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from logchannel.errors import ProfileError
from logchannel.models.routing import ChannelSpec, RoutingProfile, SinkSpec
from logchannel.sinks import is_sink
from logchannel.sinks.console import ConsoleSink
from logchannel.sinks.file import FileSink
from logchannel.sinks.logging_bridge import LoggingSink
from logchannel.sinks.memory import MemorySink
from logchannel.sinks.stderr import StderrTransmitter
from logchannel.sinks.stream import StreamSink

if TYPE_CHECKING:
    from logchannel.registry import ChannelRegistry
    from logchannel.sinks import SinkAdapter

logger = logging.getLogger(__name__)

SinkFactory = Callable[..., "SinkAdapter"]


# ---------------------------------------------------------------------------
# Sink factories
# ---------------------------------------------------------------------------


def _stream_sink(target: str = "stderr") -> StreamSink:
    streams = {"stdout": sys.stdout, "stderr": sys.stderr}
    if target not in streams:
        raise ValueError(f"stream target must be 'stdout' or 'stderr', got {target!r}")
    return StreamSink(streams[target], name=target)


def _file_sink(path: str, mode: str = "a", encoding: str = "utf-8") -> FileSink:
    return FileSink(path, mode=mode, encoding=encoding)


def _logging_sink(name: str = "logchannel", strip_newline: bool = True) -> LoggingSink:
    return LoggingSink(name, strip_newline=strip_newline)


def _memory_sink(name: str = "memory") -> MemorySink:
    return MemorySink(name=name)


SINK_FACTORIES: dict[str, SinkFactory] = {
    "stderr": StderrTransmitter,
    "stream": _stream_sink,
    "file": _file_sink,
    "memory": _memory_sink,
    "logging": _logging_sink,
    "console": ConsoleSink,
}


def register_sink_factory(name: str, factory: SinkFactory) -> None:
    """Make *factory* available to profiles as sink ``type = "<name>"``."""
    SINK_FACTORIES[name] = factory


def build_sink(spec: SinkSpec) -> SinkAdapter:
    """Instantiate the sink described by *spec*.

    Raises
    ------
    ProfileError
        If the type is unknown, the options do not fit the factory, or the
        factory returns something that is not a sink.
    """
    factory = SINK_FACTORIES.get(spec.type)
    if factory is None:
        known = ", ".join(sorted(SINK_FACTORIES))
        raise ProfileError(f"Unknown sink type {spec.type!r} (known: {known})")
    try:
        sink = factory(**spec.options)
    except (TypeError, ValueError) as exc:
        raise ProfileError(f"Cannot build {spec.type!r} sink: {exc}") from exc
    if not is_sink(sink):
        raise ProfileError(f"Factory for {spec.type!r} did not return a sink")
    return sink


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def parse_profile(data: dict[str, Any]) -> RoutingProfile:
    """Validate an already-parsed mapping as a ``RoutingProfile``."""
    try:
        return RoutingProfile.model_validate(data)
    except ValidationError as exc:
        raise ProfileError(f"Invalid routing profile: {exc}") from exc


def load_profile(path: Path | str) -> RoutingProfile:
    """Read and validate a TOML routing profile.

    Raises
    ------
    ProfileError
        If the file is missing, is not valid TOML, or fails validation.
    """
    path = Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except OSError as exc:
        raise ProfileError(f"Cannot read routing profile {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ProfileError(f"Routing profile {path} is not valid TOML: {exc}") from exc
    profile = parse_profile(data)
    logger.info("Loaded routing profile %s (%d channels)", path, len(profile.channels))
    return profile


# ---------------------------------------------------------------------------
# Applying
# ---------------------------------------------------------------------------


def _build_sinks(specs: list[SinkSpec]) -> list[SinkAdapter]:
    """Build every enabled sink in *specs*; on failure close what was built."""
    sinks: list[SinkAdapter] = []
    try:
        for sink_spec in specs:
            if sink_spec.enabled:
                sinks.append(build_sink(sink_spec))
    except ProfileError:
        close_sinks(sinks)
        raise
    return sinks


def _configure(
    registry: ChannelRegistry, spec: ChannelSpec, sinks: list[SinkAdapter]
) -> None:
    if spec.enabled is True:
        registry.enable(spec.topic)
    elif spec.enabled is False:
        registry.disable(spec.topic)
    if spec.decoration is not None:
        registry.decorate(spec.topic, spec.decoration)
    if spec.priority is not None:
        registry.set_priority(spec.topic, spec.priority)
    if spec.context is not None:
        registry.set_context(spec.topic, spec.context)
    if sinks:
        registry.dispatch(spec.topic, *sinks)


def apply_channel(registry: ChannelRegistry, spec: ChannelSpec) -> list[SinkAdapter]:
    """Apply one ``ChannelSpec`` to *registry*; returns the sinks it built."""
    sinks = _build_sinks(spec.sinks)
    _configure(registry, spec, sinks)
    return sinks


def apply_profile(registry: ChannelRegistry, profile: RoutingProfile) -> list[SinkAdapter]:
    """Apply every channel in *profile* to *registry*.

    All sinks for all channels are built before the registry changes.  If
    any sink cannot be built, the ones already built are closed and the
    registry is left as it was.  The returned list holds every sink
    created; closing them is the caller's job.
    """
    built: list[tuple[ChannelSpec, list[SinkAdapter]]] = []
    try:
        for spec in profile.channels:
            built.append((spec, _build_sinks(spec.sinks)))
    except ProfileError:
        close_sinks([sink for _, sinks in built for sink in sinks])
        raise

    created: list[SinkAdapter] = []
    for spec, sinks in built:
        _configure(registry, spec, sinks)
        created.extend(sinks)
    logger.info(
        "Applied routing profile: %d channels, %d sinks",
        len(profile.channels),
        len(created),
    )
    return created


def close_sinks(sinks: list[SinkAdapter]) -> None:
    """Close every sink in *sinks* that has a ``close`` method."""
    for sink in sinks:
        close = getattr(sink, "close", None)
        if callable(close):
            close()
