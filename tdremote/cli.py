"""Command line entry point."""

import asyncio
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from tdremote.commands.base import CommandContext
from tdremote.commands.registry import CommandRegistry, get_command_registry
from tdremote.config import TARGET_HELP, ClientConfig, load_config
from tdremote.core.exceptions import ConfigurationError, RemoteAdminError
from tdremote.transport.factory import create_transport
from tdremote.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Administer a deployed TouchDevelop shell.")


def print_usage(console: Console, registry: CommandRegistry) -> None:
    console.print("usage: tdremote command")
    console.print("Commands:")
    for line in registry.usage_lines():
        console.print(line)


def resolve_config(
    runtime_dir: Path | None = None,
    manifest: Path | None = None,
) -> ClientConfig:
    """Load the configuration and settle whether output is interactive."""
    overrides = {}
    if runtime_dir is not None:
        overrides["runtime_dir"] = runtime_dir
    if manifest is not None:
        overrides["manifest_path"] = manifest
    config = load_config(**overrides)
    if config.interactive is None:
        config = config.model_copy(update={"interactive": sys.stdout.isatty()})
    return config


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    verb: Annotated[str | None, typer.Argument(help="Command to run")] = None,
    args: Annotated[list[str] | None, typer.Argument(help="Command arguments")] = None,
    runtime_dir: Annotated[
        Path | None, typer.Option("--runtime-dir", help="Directory with compiled scripts")
    ] = None,
    manifest: Annotated[
        Path | None, typer.Option("--manifest", help="package.json to deploy")
    ] = None,
) -> None:
    config = resolve_config(runtime_dir, manifest)
    configure_logging(config)
    console = Console(markup=False, highlight=False)

    if not config.target:
        console.print(TARGET_HELP)
        return

    registry = get_command_registry()
    command = registry.create(verb) if verb else None
    if command is None:
        print_usage(console, registry)
        return

    try:
        ctx = CommandContext(config=config, transport=create_transport(config), console=console)
        asyncio.run(command.run(ctx, args or []))
    except ConfigurationError as exc:
        console.print(exc.message)
    except RemoteAdminError as exc:
        logger.error("command.failed", command=command.name, error=exc.message, **exc.details)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
