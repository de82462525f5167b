# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : config.py
#   file_relpath : src/bpmngen/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""bpmngen `config` command.

Prints the effective configuration (defaults merged with the config file) as
TOML, in the layout of a ``bpmngen.toml`` file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bpmngen.cli.cmd_common import build_config
from bpmngen.cli.options import CONTEXT_SETTINGS, common_config_options

if TYPE_CHECKING:
    from bpmngen.cli.console import ClickConsole
    from bpmngen.config import Config


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
def config_command(*, config_file: str | None) -> None:
    """Print the merged configuration.

    Args:
        config_file (str | None): Explicit config file (``--config``).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config: Config = build_config(config_file)
    for diagnostic in config.diagnostics:
        console.warn(diagnostic.render())
    if config.config_files:
        console.print(f"# Config files: {', '.join(str(p) for p in config.config_files)}")
    console.print(config.to_toml(), nl=False)
