"""CLI verbs for tdremote."""

from tdremote.commands.base import BaseCommand, CommandContext, CommandInput
from tdremote.commands.deploy import DeployCommand
from tdremote.commands.env import GetenvCommand, RestartCommand, SetenvCommand
from tdremote.commands.logs import LogCommand, ShellCommand
from tdremote.commands.registry import CommandRegistry, get_command_registry
from tdremote.commands.stats import StatsCommand, WorkerCommand

__all__ = [
    "BaseCommand",
    "CommandContext",
    "CommandInput",
    "CommandRegistry",
    "get_command_registry",
    "DeployCommand",
    "GetenvCommand",
    "LogCommand",
    "RestartCommand",
    "SetenvCommand",
    "ShellCommand",
    "StatsCommand",
    "WorkerCommand",
]
