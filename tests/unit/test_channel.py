"""Unit tests for ChannelHandle."""

from __future__ import annotations

import pytest

from logchannel.channel import ChannelHandle


class TestChannelHandle:
    def test_exposes_topic_and_registry(self, registry):
        log = registry.make_channel("app")
        assert isinstance(log, ChannelHandle)
        assert log.topic == "app"
        assert log.registry is registry

    def test_is_immutable(self, registry):
        log = registry.make_channel("app")
        with pytest.raises(AttributeError):
            log.topic = "other"
        with pytest.raises(AttributeError):
            log._topic = "other"

    def test_call_joins_fragments_without_separator(self, registry, make_sink):
        sink = make_sink()
        registry.dispatch("app", sink)
        log = registry.make_channel("app")
        log("a", "b", 3, "\n")
        assert sink.messages == ["ab3\n"]

    def test_call_returns_none(self, registry, make_sink):
        registry.dispatch("app", make_sink())
        assert registry.make_channel("app")("x") is None

    def test_enabled_reflects_registry(self, registry):
        log = registry.make_channel("app")
        assert log.enabled is True
        registry.disable("app")
        assert log.enabled is False

    def test_repr(self, registry):
        assert repr(registry.make_channel("app")) == "<ChannelHandle topic='app'>"

    def test_handle_reads_live_configuration(self, registry, make_sink, capsys):
        """Configuration applied after the handle was created is honoured."""
        log = registry.make_channel("app")
        registry.decorate("app", "topic> ")
        log("one")
        sink = make_sink()
        registry.dispatch("app", sink)
        registry.set_priority("app", "err")
        log("two")
        assert capsys.readouterr().err == "app> one"
        assert sink.records[0].level == "err"
        assert sink.messages == ["app> two"]
