# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : version.py
#   file_relpath : src/bpmngen/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""bpmngen `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bpmngen.constants import BPMNGEN_VERSION

if TYPE_CHECKING:
    from bpmngen.cli.console import ClickConsole


@click.command(name="version", help="Show the current version of bpmngen.")
def version_command() -> None:
    """Print the bpmngen version as installed in the current Python environment."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    console.print(f"bpmngen {BPMNGEN_VERSION}")
