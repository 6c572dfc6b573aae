"""Base command class for all CLI verbs."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from rich.console import Console
from rich.json import JSON
from rich.text import Text

from tdremote.config import ClientConfig
from tdremote.core.logs import LogAggregator, LogLine
from tdremote.core.remote_config import ConfigClient
from tdremote.transport.base import Transport
from tdremote.utils.logging import get_logger

SEVERITY_STYLES = {
    "error": "bold red",
    "warning": "yellow",
    "info": "",
    "debug": "dim",
    "noisy": "dim italic",
}


class CommandInput(BaseModel):
    """Arguments of a verb; the default takes none and ignores extras."""

    @classmethod
    def from_args(cls, args: list[str]) -> "CommandInput":
        return cls()


InputT = TypeVar("InputT", bound=CommandInput)


@dataclass
class CommandContext:
    """Everything a command needs for one invocation."""

    config: ClientConfig
    transport: Transport
    console: Console

    @property
    def interactive(self) -> bool:
        return bool(self.config.interactive)

    def log_aggregator(self) -> LogAggregator:
        return LogAggregator(interactive=self.interactive)

    def config_client(self) -> ConfigClient:
        return ConfigClient(self.transport, null_string_deletes=self.config.null_string_deletes)

    async def fetch_json(self, path: str, payload: Any = None) -> Any:
        """Send, fail on a non-2xx status and decode the JSON body."""
        response = await self.transport.send(path, payload)
        response.raise_for_status()
        return response.json()

    def print_json(self, data: Any) -> None:
        self.console.print(JSON.from_data(data, indent=2), soft_wrap=True)

    def print_lines(self, lines: list[LogLine]) -> None:
        for line in lines:
            style = SEVERITY_STYLES.get(line.severity or "", "")
            self.console.print(Text(line.text, style=style), soft_wrap=True)


class BaseCommand(ABC, Generic[InputT]):
    """Base class for CLI verbs.

    Subclasses declare:
    - name: Verb typed on the command line
    - usage: Verb with its argument synopsis
    - summary: One-line help text
    - input_model: CommandInput subclass parsing the arguments
    - execute(): The operation itself
    """

    input_model: ClassVar[type[CommandInput]] = CommandInput

    def __init__(self):
        self.logger = get_logger(f"command.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    def usage(self) -> str:
        return self.name

    @property
    @abstractmethod
    def summary(self) -> str:
        pass

    def parse(self, args: list[str]) -> InputT:
        return self.input_model.from_args(args)

    @abstractmethod
    async def execute(self, ctx: CommandContext, input_data: InputT) -> Any:
        """Run the verb against the remote environment."""
        pass

    async def run(self, ctx: CommandContext, args: list[str]) -> Any:
        return await self.execute(ctx, self.parse(args))
