"""Command registry for the CLI verbs."""

from functools import lru_cache

from tdremote.commands.base import BaseCommand
from tdremote.commands.deploy import DeployCommand
from tdremote.commands.env import GetenvCommand, RestartCommand, SetenvCommand
from tdremote.commands.logs import LogCommand, ShellCommand
from tdremote.commands.stats import StatsCommand, WorkerCommand
from tdremote.utils.logging import get_logger

logger = get_logger(__name__)

USAGE_COLUMN = 22


class CommandRegistry:
    """Registry mapping verbs to command classes."""

    def __init__(self):
        self._commands: dict[str, type[BaseCommand]] = {}

    def register(self, command_class: type[BaseCommand]) -> None:
        """Register a command class under its verb."""
        name = command_class().name

        if name in self._commands:
            logger.warning("command.overwritten", name=name)

        self._commands[name] = command_class

    def get(self, name: str) -> type[BaseCommand] | None:
        return self._commands.get(name)

    def create(self, name: str) -> BaseCommand | None:
        """Create a command instance by verb, or None for unknown verbs."""
        command_class = self.get(name)
        if command_class:
            return command_class()
        return None

    def list_commands(self) -> list[str]:
        return list(self._commands.keys())

    def usage_lines(self) -> list[str]:
        """Help table: synopsis padded to a fixed column, then the summary."""
        lines = []
        for command_class in self._commands.values():
            command = command_class()
            lines.append(f"{command.usage:<{USAGE_COLUMN}}{command.summary}")
        return lines


BUILTIN_COMMANDS: list[type[BaseCommand]] = [
    DeployCommand,
    ShellCommand,
    LogCommand,
    StatsCommand,
    RestartCommand,
    GetenvCommand,
    SetenvCommand,
    WorkerCommand,
]


@lru_cache
def get_command_registry() -> CommandRegistry:
    """Get the registry with all built-in verbs."""
    registry = CommandRegistry()
    for command_class in BUILTIN_COMMANDS:
        registry.register(command_class)
    return registry
