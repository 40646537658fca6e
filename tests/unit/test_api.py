"""Tests for the module-level API backed by the application-wide registry."""

from __future__ import annotations

import warnings

import pytest

import logchannel
from logchannel.registry import ChannelRegistry, get_registry, set_registry
from logchannel.sinks.memory import MemorySink


class TestDefaultRegistry:
    def test_get_registry_is_stable(self, default_registry):
        assert get_registry() is default_registry
        assert get_registry() is get_registry()

    def test_set_registry_none_builds_fresh(self, default_registry):
        previous = set_registry(None)
        try:
            fresh = get_registry()
            assert isinstance(fresh, ChannelRegistry)
            assert fresh is not default_registry
        finally:
            set_registry(previous)


class TestModuleFunctions:
    def test_new_channel_namespace_is_caller(self, default_registry):
        log = logchannel.new_channel("sql")
        assert log.topic == f"{__name__}::sql"
        assert default_registry.channel(log.topic) is log

    def test_new_channel_explicit_namespace(self, default_registry):
        assert logchannel.new_channel(namespace="pkg").topic == "pkg"

    def test_make_channel(self, default_registry):
        assert logchannel.make_channel("a::b").topic == "a::b"

    def test_duplicate_warning_attributed_to_caller(self, default_registry):
        logchannel.make_channel("dup")
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            logchannel.make_channel("dup")
        assert caught[0].category is logchannel.DuplicateChannelWarning
        assert caught[0].filename == __file__

    def test_msg_goes_to_caller_namespace(self, default_registry, capsys):
        logchannel.msg("hello\n")
        assert capsys.readouterr().err == "hello\n"
        assert default_registry.channel(__name__) is not None

    def test_configuration_functions(self, default_registry):
        sink = MemorySink()
        logchannel.dispatch("app", sink)
        logchannel.decorate("app", "topic [context] ")
        logchannel.set_context("app", "ctx")
        logchannel.set_priority("app", "warning")
        log = logchannel.make_channel("app")
        log("x")
        logchannel.disable("app")
        log("dropped")
        logchannel.enable("app")
        log("y")
        assert [(r.level, r.message) for r in sink.records] == [
            ("warning", "app [ctx] x"),
            ("warning", "app [ctx] y"),
        ]

    def test_namespace_keyword(self, default_registry):
        logchannel.disable("db", namespace="pkg")
        assert not default_registry.is_enabled("pkg::db")

    def test_dispatch_rejects_non_sink(self, default_registry):
        with pytest.raises(logchannel.InvalidSinkError):
            logchannel.dispatch("app", "not a sink")

    def test_status_and_snapshot(self, default_registry):
        logchannel.make_channel("app")
        assert logchannel.status() is None
        assert logchannel.snapshot().get("app").has_handle

    def test_version(self):
        assert logchannel.__version__ == "0.4.0"
