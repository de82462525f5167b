# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : main.py
#   file_relpath : src/bpmngen/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""bpmngen command line entry point.

Group-level options are initialized once and placed into ``ctx.obj``; the
subcommands read the console and log level from there.
"""

from __future__ import annotations

import click

from bpmngen.cli.commands.config import config_command
from bpmngen.cli.commands.generate import generate_command
from bpmngen.cli.commands.version import version_command
from bpmngen.cli.console import ClickConsole
from bpmngen.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from bpmngen.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize logging and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    ctx.obj["verbosity_level"] = verbose - quiet
    setup_logging(level=log_level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Generate Python service stubs from BPMN process definitions.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the bpmngen CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'bpmngen generate [SOURCE_DIR]' to generate code.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(generate_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
