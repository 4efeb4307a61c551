from __future__ import annotations

import os
from typing import Annotated

import typer

from fleet.common import create_logger, setup_cli_logging
from fleet.settings import settings

from .commands import store as store_commands

logger = create_logger("cli")

app = typer.Typer(help="Fleet command-line interface.")
app.add_typer(store_commands.app, name="store")


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging() -> None:
    logging_config = settings.logging

    if logging_config.enabled:
        setup_cli_logging(
            app_info=settings.app,
            config=logging_config,
            paths=settings.paths,
        )
        logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the fleet CLI."""
    _setup_logging()
    app()
