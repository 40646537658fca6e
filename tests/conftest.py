"""Shared test fixtures for logchannel."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator

import pytest

import logchannel
from logchannel.config import ChannelSettings
from logchannel.registry import ChannelRegistry
from logchannel.sinks.memory import MemorySink


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep LOGCHANNEL_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("LOGCHANNEL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> ChannelSettings:
    """Settings with defaults only (no .env file)."""
    return ChannelSettings(_env_file=None)


@pytest.fixture
def registry(settings: ChannelSettings) -> ChannelRegistry:
    """Provide a fresh, isolated ChannelRegistry."""
    return ChannelRegistry(settings=settings)


@pytest.fixture
def default_registry(registry: ChannelRegistry) -> Iterator[ChannelRegistry]:
    """Install an isolated registry as the application-wide one."""
    previous = logchannel.set_registry(registry)
    yield registry
    logchannel.set_registry(previous)


@pytest.fixture
def make_sink() -> Callable[..., MemorySink]:
    """Factory fixture: build named MemorySinks."""

    def _factory(name: str = "memory") -> MemorySink:
        return MemorySink(name=name)

    return _factory


class RecordingSink:
    """A plain sink (no base class) that records calls, shared across modules."""

    def __init__(self, name: str, journal: list[tuple[str, str, str]] | None = None) -> None:
        self.name = name
        self.journal = journal if journal is not None else []

    def accept(self, level: str, message: str) -> None:
        self.journal.append((self.name, level, message))


@pytest.fixture
def journal() -> list[tuple[str, str, str]]:
    """Shared call log for RecordingSinks, to check cross-sink ordering."""
    return []


@pytest.fixture
def recording_sink_cls() -> type[RecordingSink]:
    return RecordingSink
