"""Unit tests for CLI verbs."""

import json
from pathlib import Path

import pytest

from tdremote.commands import (
    DeployCommand,
    GetenvCommand,
    LogCommand,
    RestartCommand,
    SetenvCommand,
    ShellCommand,
    StatsCommand,
    WorkerCommand,
    get_command_registry,
)
from tdremote.commands.base import CommandContext
from tdremote.core.exceptions import ConfigurationError, MalformedResponseError, TransportError


def output(ctx: CommandContext) -> str:
    return ctx.console.file.getvalue()


class TestCommandRegistry:
    """Tests for CommandRegistry."""

    def test_builtin_verbs(self):
        assert get_command_registry().list_commands() == [
            "deploy",
            "shell",
            "log",
            "stats",
            "restart",
            "getenv",
            "setenv",
            "worker",
        ]

    def test_create_unknown(self):
        assert get_command_registry().create("explode") is None

    def test_usage_lines(self):
        lines = get_command_registry().usage_lines()
        assert "deploy                deploy JS files" in lines
        assert "worker PATH [DATA]    forward to one worker" in lines


class TestDeployCommand:
    @pytest.mark.asyncio
    async def test_deploy_sends_bundle(self, ctx: CommandContext, remote):
        remote.routes["deploy"] = (200, {})

        instructions = await DeployCommand().run(ctx, [])

        path, payload = remote.calls[0]
        assert path == "deploy"
        assert [f["path"] for f in payload["files"]] == instructions.paths
        assert "deployed 4 files" in output(ctx)

    @pytest.mark.asyncio
    async def test_deploy_failure(self, ctx: CommandContext, remote):
        remote.routes["deploy"] = (500, {"error": "disk full"})

        with pytest.raises(TransportError):
            await DeployCommand().run(ctx, [])


class TestLogCommands:
    @pytest.mark.asyncio
    async def test_shell(self, ctx: CommandContext, remote):
        remote.routes["combinedlogs"] = (
            200,
            {"logs": [{"msg": "up", "category": "shell", "level": 6}, None]},
        )

        await ShellCommand().run(ctx, [])

        assert output(ctx) == "up\n"

    @pytest.mark.asyncio
    async def test_shell_malformed(self, ctx: CommandContext, remote):
        remote.routes["combinedlogs"] = (200, {"nothing": True})

        with pytest.raises(MalformedResponseError):
            await ShellCommand().run(ctx, [])

    @pytest.mark.asyncio
    async def test_log(self, ctx: CommandContext, remote):
        remote.routes["info/applog"] = (
            200,
            {
                "workers": [
                    {"worker": "w0", "body": {"applog": [{"msg": "hi", "category": "app", "level": 3}]}},
                    {"worker": "w1", "body": {"applog": None}},
                ]
            },
        )

        await LogCommand().run(ctx, [])

        assert output(ctx).splitlines() == ["--------- w0", "app: hi", "--------- w1"]

    def test_log_merge_flag(self):
        assert LogCommand().parse(["--merge"]).merge is True
        assert LogCommand().parse([]).merge is False


class TestStatsCommands:
    @pytest.mark.asyncio
    async def test_stats(self, ctx: CommandContext, remote):
        remote.routes["stats"] = (200, {"uptime": 12, "workers": 2})

        await StatsCommand().run(ctx, [])

        assert json.loads(output(ctx)) == {"uptime": 12, "workers": 2}

    @pytest.mark.asyncio
    async def test_worker_get(self, ctx: CommandContext, remote):
        remote.routes["worker"] = (200, {"ok": True})

        await WorkerCommand().run(ctx, ["/api/status"])

        assert remote.calls == [("worker", {"path": "/api/status", "method": "GET", "body": None})]

    @pytest.mark.asyncio
    async def test_worker_post(self, ctx: CommandContext, remote):
        remote.routes["worker"] = (200, {"ok": True})

        await WorkerCommand().run(ctx, ["/api/echo", '{"a":1}'])

        assert remote.calls[0][1] == {"path": "/api/echo", "method": "POST", "body": '{"a":1}'}

    def test_worker_requires_path(self):
        with pytest.raises(ConfigurationError):
            WorkerCommand().parse([])


class TestEnvCommands:
    @pytest.mark.asyncio
    async def test_getenv(self, ctx: CommandContext, remote):
        remote.settings = {"FOO": "1"}

        await GetenvCommand().run(ctx, [])

        assert json.loads(output(ctx)) == {"FOO": "1"}

    @pytest.mark.asyncio
    async def test_setenv_assignment(self, ctx: CommandContext, remote):
        remote.settings = {"FOO": "0", "BAR": "2"}

        await SetenvCommand().run(ctx, ["FOO=1"])

        assert remote.settings == {"FOO": "1", "BAR": "2"}
        assert json.loads(output(ctx)) == {"FOO": "1", "BAR": "2"}

    @pytest.mark.asyncio
    async def test_setenv_assignment_null(self, ctx: CommandContext, remote):
        remote.settings = {"FOO": "1", "BAR": "2"}

        await SetenvCommand().run(ctx, ["FOO=null"])

        assert remote.settings == {"BAR": "2"}

    @pytest.mark.asyncio
    async def test_setenv_file_merges(self, ctx: CommandContext, remote, tmp_path: Path):
        remote.settings = {"FOO": "1", "BAR": "2"}
        patch = tmp_path / "env.json"
        patch.write_text(json.dumps({"BAR": None, "BAZ": "3"}))

        await SetenvCommand().run(ctx, [str(patch)])

        assert remote.settings == {"FOO": "1", "BAZ": "3"}

    @pytest.mark.asyncio
    async def test_setenv_file_replace(self, ctx: CommandContext, remote, tmp_path: Path):
        remote.settings = {"FOO": "1"}
        patch = tmp_path / "env.json"
        patch.write_text(json.dumps({"ONLY": "x", "GONE": None}))

        await SetenvCommand().run(ctx, [str(patch), "--replace"])

        assert remote.settings == {"ONLY": "x"}

    @pytest.mark.asyncio
    async def test_setenv_replace_rejects_assignment(self, ctx: CommandContext):
        with pytest.raises(ConfigurationError):
            await SetenvCommand().run(ctx, ["FOO=1", "--replace"])

    def test_setenv_requires_source(self):
        with pytest.raises(ConfigurationError, match="need JSON filename or VAR=val"):
            SetenvCommand().parse([])

    @pytest.mark.asyncio
    async def test_restart(self, ctx: CommandContext, remote):
        await RestartCommand().run(ctx, [])

        assert remote.calls == [("setconfig", {})]
        assert "restart requested" in output(ctx)
