"""Remote environment configuration commands."""

from typing import Any

from tdremote.commands.base import BaseCommand, CommandContext, CommandInput
from tdremote.core.exceptions import ConfigurationError
from tdremote.core.remote_config import load_patch_file, parse_assignment
from tdremote.models.settings import DeleteMarker


class GetenvCommand(BaseCommand[CommandInput]):
    @property
    def name(self) -> str:
        return "getenv"

    @property
    def summary(self) -> str:
        return "fetch current environment config"

    async def execute(self, ctx: CommandContext, input_data: CommandInput) -> Any:
        settings = await ctx.config_client().get()
        ctx.print_json(settings)
        return settings


class SetenvInput(CommandInput):
    source: str
    replace: bool = False

    @classmethod
    def from_args(cls, args: list[str]) -> "SetenvInput":
        replace = "--replace" in args
        positional = [a for a in args if a != "--replace"]
        if not positional or not positional[0]:
            raise ConfigurationError("need JSON filename or VAR=val")
        return cls(source=positional[0], replace=replace)


class SetenvCommand(BaseCommand[SetenvInput]):
    """Update the remote environment from ``VAR=val`` or a JSON file.

    With ``--replace`` the JSON file becomes the complete settings set.
    """

    input_model = SetenvInput

    @property
    def name(self) -> str:
        return "setenv"

    @property
    def usage(self) -> str:
        return "setenv file|VAR=val"

    @property
    def summary(self) -> str:
        return "set current environment config"

    async def execute(self, ctx: CommandContext, input_data: SetenvInput) -> Any:
        client = ctx.config_client()
        assignment = parse_assignment(input_data.source)

        if input_data.replace:
            if assignment is not None:
                raise ConfigurationError("--replace needs a JSON file, not VAR=val")
            patch = load_patch_file(input_data.source)
            settings = await client.replace(
                {k: v for k, v in patch.items() if not isinstance(v, DeleteMarker)}
            )
        else:
            patch = assignment if assignment is not None else load_patch_file(input_data.source)
            settings = await client.set(patch)

        ctx.print_json(settings)
        return settings


class RestartCommand(BaseCommand[CommandInput]):
    @property
    def name(self) -> str:
        return "restart"

    @property
    def summary(self) -> str:
        return "restart worker (poke the config)"

    async def execute(self, ctx: CommandContext, input_data: CommandInput) -> Any:
        await ctx.config_client().restart()
        ctx.console.print("restart requested")
        return None
