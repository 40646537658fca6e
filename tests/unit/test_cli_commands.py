"""Unit tests for the CLI — Typer command registration and basic behavior."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from logchannel.cli.app import app

runner = CliRunner()


def _profile(tmp_path: Path, log_path: Path) -> Path:
    path = tmp_path / "channels.toml"
    path.write_text(
        f"""
[[channels]]
topic = "app"
decoration = "topic| text"
priority = "notice"

  [[channels.sinks]]
  type = "file"
  path = "{log_path.as_posix()}"

[[channels]]
topic = "quiet"
enabled = false
""",
        encoding="utf-8",
    )
    return path


class TestCliApp:
    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        # Typer's no_args_is_help may exit with 0 or 2 depending on version
        assert result.exit_code in (0, 2)
        assert "usage" in result.output.lower()

    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for name in ("status", "emit", "render"):
            assert name in result.output


class TestRenderCommand:
    def test_render(self):
        result = runner.invoke(app, ["render", "topic: text", "--topic", "app", "--text", "hi"])
        assert result.exit_code == 0
        assert result.output == "app: hi\n"

    def test_render_with_context(self):
        result = runner.invoke(app, ["render", "[context] ", "-c", "abc", "--text", "m"])
        assert result.exit_code == 0
        assert result.output == "[abc] m\n"


class TestEmitCommand:
    def test_emit_through_profile(self, tmp_path: Path):
        log_path = tmp_path / "app.log"
        result = runner.invoke(
            app, ["emit", "app", "hello", "world", "--profile", str(_profile(tmp_path, log_path))]
        )
        assert result.exit_code == 0, result.output
        assert log_path.read_text(encoding="utf-8") == "app| hello world\n"

    def test_emit_no_newline(self, tmp_path: Path):
        log_path = tmp_path / "app.log"
        result = runner.invoke(
            app,
            ["emit", "app", "x", "--no-newline", "--profile", str(_profile(tmp_path, log_path))],
        )
        assert result.exit_code == 0, result.output
        assert log_path.read_text(encoding="utf-8") == "app| x"

    def test_emit_default_goes_to_stderr(self):
        result = runner.invoke(app, ["emit", "plain", "hello"])
        assert result.exit_code == 0
        assert "hello" in result.output

    def test_emit_bad_profile(self, tmp_path: Path):
        result = runner.invoke(app, ["emit", "app", "x", "--profile", str(tmp_path / "nope.toml")])
        assert result.exit_code == 1
        assert "Profile error" in result.output


class TestStatusCommand:
    def test_status_table(self, tmp_path: Path):
        profile = _profile(tmp_path, tmp_path / "app.log")
        result = runner.invoke(app, ["status", "--profile", str(profile)])
        assert result.exit_code == 0, result.output
        assert "app" in result.output
        assert "quiet" in result.output
        assert "notice" in result.output

    def test_status_empty(self):
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "No channels configured" in result.output

    def test_status_bad_profile(self, tmp_path: Path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[[channels]]\n", encoding="utf-8")
        result = runner.invoke(app, ["status", "--profile", str(bad)])
        assert result.exit_code == 1
        assert "Profile error" in result.output

    def test_status_shows_default_priority(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("LOGCHANNEL_DEFAULT_PRIORITY", "emerg")
        profile = _profile(tmp_path, tmp_path / "app.log")
        result = runner.invoke(app, ["status", "--profile", str(profile)])
        assert result.exit_code == 0, result.output
        assert "Default priority: emerg" in result.output

    def test_status_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("LOGCHANNEL_LOG_LEVEL", "verbose")
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 1
        assert "Settings error" in result.output


class TestSettingsErrors:
    def test_emit_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("LOGCHANNEL_LOG_LEVEL", "verbose")
        result = runner.invoke(app, ["emit", "app", "x"])
        assert result.exit_code == 1
        assert "Settings error" in result.output

    def test_render_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("LOGCHANNEL_LOG_LEVEL", "verbose")
        result = runner.invoke(app, ["render", "topic: text"])
        assert result.exit_code == 1
        assert "Settings error" in result.output
