"""Integration test — a library emits, a deployer routes via a profile.

The "library" below knows nothing about sinks; the test plays the deployer
and configures everything from a TOML routing profile.
"""

from __future__ import annotations

import logging
from pathlib import Path

import logchannel
from logchannel.profile import apply_profile, close_sinks, load_profile

PROFILE = """
[[channels]]
topic = "shop.orders::audit"
decoration = "[context] topic: text\\n"
context = "tenant-7"
priority = "notice"

  [[channels.sinks]]
  type = "file"
  path = "{audit_log}"

  [[channels.sinks]]
  type = "logging"
  name = "deployer.audit"

[[channels]]
topic = "shop.orders"
enabled = false
"""


def _library_code() -> None:
    """Stands in for third-party code that only knows about channels."""
    audit = logchannel.new_channel("audit", namespace="shop.orders")
    debug = logchannel.new_channel(namespace="shop.orders")
    audit("order ", 1001, " placed")
    debug("internal detail\n")
    logchannel.msg("unrouted\n", namespace="shop.payments")


class TestProfileRouting:
    def test_end_to_end(self, default_registry, tmp_path: Path, caplog, capsys):
        audit_log = tmp_path / "logs" / "audit.log"
        profile_path = tmp_path / "channels.toml"
        profile_path.write_text(
            PROFILE.format(audit_log=audit_log.as_posix()), encoding="utf-8"
        )

        sinks = apply_profile(default_registry, load_profile(profile_path))
        try:
            with caplog.at_level(logging.INFO, logger="deployer.audit"):
                _library_code()
        finally:
            close_sinks(sinks)

        expected = "[tenant-7] shop.orders::audit: order 1001 placed\n"
        assert audit_log.read_text(encoding="utf-8") == expected

        bridged = [r for r in caplog.records if r.name == "deployer.audit"]
        assert [r.getMessage() for r in bridged] == [expected.rstrip("\n")]
        assert bridged[0].levelno == logging.INFO

        # disabled namespace channel is silent; the unrouted one hits stderr raw
        assert capsys.readouterr().err == "unrouted\n"

        snap = logchannel.snapshot()
        assert snap.get("shop.orders").enabled is False
        assert snap.get("shop.orders::audit").priority == "notice"
        assert snap.get("shop.payments").destination == "stderr (default)"
