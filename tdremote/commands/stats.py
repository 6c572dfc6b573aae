"""Stats and worker forwarding commands."""

from typing import Any

from tdremote.commands.base import BaseCommand, CommandContext, CommandInput
from tdremote.core.exceptions import ConfigurationError

STATS_PATH = "/stats"
WORKER_PATH = "worker"


class StatsCommand(BaseCommand[CommandInput]):
    @property
    def name(self) -> str:
        return "stats"

    @property
    def summary(self) -> str:
        return "see various shell stats"

    async def execute(self, ctx: CommandContext, input_data: CommandInput) -> Any:
        data = await ctx.fetch_json(STATS_PATH)
        ctx.print_json(data)
        return data


class WorkerInput(CommandInput):
    path: str
    data: str | None = None

    @property
    def method(self) -> str:
        return "GET" if self.data is None else "POST"

    @classmethod
    def from_args(cls, args: list[str]) -> "WorkerInput":
        if not args:
            raise ConfigurationError("usage: worker PATH [DATA]")
        return cls(path=args[0], data=args[1] if len(args) > 1 else None)


class WorkerCommand(BaseCommand[WorkerInput]):
    """Forward a request to a single worker through the shell."""

    input_model = WorkerInput

    @property
    def name(self) -> str:
        return "worker"

    @property
    def usage(self) -> str:
        return "worker PATH [DATA]"

    @property
    def summary(self) -> str:
        return "forward to one worker"

    async def execute(self, ctx: CommandContext, input_data: WorkerInput) -> Any:
        data = await ctx.fetch_json(
            WORKER_PATH,
            {
                "path": input_data.path,
                "method": input_data.method,
                "body": input_data.data,
            },
        )
        ctx.print_json(data)
        return data
