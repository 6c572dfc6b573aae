"""Log viewing commands."""

from typing import Any

from tdremote.commands.base import BaseCommand, CommandContext, CommandInput
from tdremote.core.exceptions import MalformedResponseError

COMBINED_LOGS_PATH = "/combinedlogs"
APPLOG_PATH = "/info/applog"


def _require_list(data: Any, key: str, path: str) -> list[Any]:
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, list):
        raise MalformedResponseError(f"expected a '{key}' list", path=path)
    return value


class ShellCommand(BaseCommand[CommandInput]):
    """Show the shell's own combined log."""

    @property
    def name(self) -> str:
        return "shell"

    @property
    def summary(self) -> str:
        return "see shell logs"

    async def execute(self, ctx: CommandContext, input_data: CommandInput) -> Any:
        data = await ctx.fetch_json(COMBINED_LOGS_PATH)
        records = _require_list(data, "logs", COMBINED_LOGS_PATH)
        lines = ctx.log_aggregator().render_entries(records, elide_category="shell")
        ctx.print_lines(lines)
        return lines


class LogInput(CommandInput):
    merge: bool = False

    @classmethod
    def from_args(cls, args: list[str]) -> "LogInput":
        return cls(merge="--merge" in args)


class LogCommand(BaseCommand[LogInput]):
    """Show application logs, one block per worker."""

    input_model = LogInput

    @property
    def name(self) -> str:
        return "log"

    @property
    def usage(self) -> str:
        return "log [--merge]"

    @property
    def summary(self) -> str:
        return "see application logs"

    async def execute(self, ctx: CommandContext, input_data: LogInput) -> Any:
        data = await ctx.fetch_json(APPLOG_PATH)
        workers = _require_list(data, "workers", APPLOG_PATH)
        lines = ctx.log_aggregator().render_worker_entries(workers, merge=input_data.merge)
        ctx.print_lines(lines)
        return lines
