"""Integration tests for the command line entry point."""

import json

import pytest
from typer.testing import CliRunner

import tdremote.cli as cli
from tdremote.cli import app
from tdremote.core.exceptions import TransportError

TARGET = "https://example.test/-tdevmgmt-/seCreTc0de"


class TestCli:
    """Tests for the tdremote CLI."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        return CliRunner()

    @pytest.fixture
    def wired(self, monkeypatch, remote):
        """Point the CLI at the fake remote."""
        monkeypatch.setenv("TD_UPLOAD_TARGET", TARGET)
        monkeypatch.setenv("TD_LOG_LEVEL", "ERROR")
        monkeypatch.setattr(cli, "create_transport", lambda config: remote)
        return remote

    def test_missing_target_prints_help(self, runner: CliRunner, monkeypatch):
        monkeypatch.setenv("TD_UPLOAD_TARGET", "")

        result = runner.invoke(app, ["deploy"])

        assert result.exit_code == 0
        assert "need TD_UPLOAD_TARGET=" in result.stdout

    def test_unknown_verb_prints_usage(self, runner: CliRunner, wired):
        result = runner.invoke(app, ["explode"])

        assert result.exit_code == 0
        assert "usage: tdremote command" in result.stdout
        assert "setenv file|VAR=val   set current environment config" in result.stdout
        assert wired.calls == []

    def test_no_verb_prints_usage(self, runner: CliRunner, wired):
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Commands:" in result.stdout

    def test_getenv(self, runner: CliRunner, wired):
        wired.settings = {"FOO": "1"}

        result = runner.invoke(app, ["getenv"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"FOO": "1"}

    def test_setenv(self, runner: CliRunner, wired):
        wired.settings = {"FOO": "0", "BAR": "2"}

        result = runner.invoke(app, ["setenv", "FOO=null"])

        assert result.exit_code == 0
        assert wired.settings == {"BAR": "2"}

    def test_setenv_without_argument(self, runner: CliRunner, wired):
        result = runner.invoke(app, ["setenv"])

        assert result.exit_code == 0
        assert "need JSON filename or VAR=val" in result.stdout

    def test_log_merge_option_passes_through(self, runner: CliRunner, wired):
        wired.routes["info/applog"] = (
            200,
            {"workers": [{"worker": "w0", "body": {"applog": [{"msg": "hi", "timestamp": 1}]}}]},
        )

        result = runner.invoke(app, ["log", "--merge"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["w0| hi"]

    def test_transport_failure_exits_nonzero(self, runner: CliRunner, wired):
        async def fail(path, payload):
            raise TransportError("connection refused", path=path)

        wired._send = fail

        result = runner.invoke(app, ["stats"])

        assert result.exit_code == 1
