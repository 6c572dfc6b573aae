"""Deploy command: push the compiled scripts to the remote shell."""

from typing import Any

from tdremote.commands.base import BaseCommand, CommandContext, CommandInput
from tdremote.core.bundle import BundleBuilder

DEPLOY_PATH = "/deploy"


class DeployCommand(BaseCommand[CommandInput]):
    @property
    def name(self) -> str:
        return "deploy"

    @property
    def summary(self) -> str:
        return "deploy JS files"

    async def execute(self, ctx: CommandContext, input_data: CommandInput) -> Any:
        instructions = BundleBuilder().build(
            ctx.config.runtime_dir,
            ctx.config.resolved_manifest_path,
        )
        response = await ctx.transport.send(DEPLOY_PATH, instructions.to_payload())
        response.raise_for_status()
        ctx.console.print(f"deployed {len(instructions.files)} files", soft_wrap=True)
        return instructions
