"""Pytest configuration and fixtures."""

import io
import json
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from tdremote.commands.base import CommandContext
from tdremote.config import ClientConfig
from tdremote.transport.base import Response, Transport

TEST_TARGET = "https://example.test/-tdevmgmt-/seCreTc0de"


class FakeRemote(Transport):
    """In-memory remote shell.

    Answers /getconfig and /setconfig from ``settings``; any other path is
    looked up in ``routes`` as ``(status, json_body)``.
    """

    def __init__(self, settings: dict[str, Any] | None = None):
        super().__init__(TEST_TARGET)
        self.settings = dict(settings or {})
        self.routes: dict[str, tuple[int, Any]] = {}
        self.calls: list[tuple[str, Any]] = []

    @property
    def mode(self) -> str:
        return "fake"

    @property
    def pushed(self) -> list[Any]:
        """Payloads sent to setconfig, in order."""
        return [payload for path, payload in self.calls if path == "setconfig"]

    async def _send(self, path: str, payload: Any) -> Response:
        self.calls.append((path, payload))
        if path == "getconfig":
            body = {"AppSettings": [{"Name": k, "Value": v} for k, v in self.settings.items()]}
            return Response(200, json.dumps(body).encode())
        if path == "setconfig":
            if payload and "AppSettings" in payload:
                self.settings = {s["Name"]: s["Value"] for s in payload["AppSettings"]}
            return Response(200, b"{}")
        if path in self.routes:
            status, body = self.routes[path]
            return Response(status, json.dumps(body).encode())
        return Response(404, b"not found")


@pytest.fixture
def remote() -> FakeRemote:
    """A fake remote with an empty settings store."""
    return FakeRemote()


@pytest.fixture
def runtime_dir(tmp_path: Path) -> Path:
    """A built runtime directory with a manifest next to it."""
    built = tmp_path / "built"
    built.mkdir()
    (built / "a.js").write_text("console.log('a');\n")
    (built / "b.js").write_text("console.log('b');\n")
    (built / "c.txt").write_text("not a script\n")
    (tmp_path / "package.json").write_text(json.dumps({"name": "x"}))
    return built


@pytest.fixture
def config(runtime_dir: Path) -> ClientConfig:
    """Configuration pointing at the test target and runtime directory."""
    return ClientConfig(
        upload_target=TEST_TARGET,
        interactive=False,
        runtime_dir=runtime_dir,
    )


@pytest.fixture
def console() -> Console:
    """Console writing into a buffer."""
    return Console(file=io.StringIO(), markup=False, highlight=False, width=200)


@pytest.fixture
def ctx(config: ClientConfig, remote: FakeRemote, console: Console) -> CommandContext:
    """Command context wired to the fake remote."""
    return CommandContext(config=config, transport=remote, console=console)
