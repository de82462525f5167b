# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : generate.py
#   file_relpath : src/bpmngen/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""bpmngen `generate` command.

Scans SOURCE_DIR (default: the configured ``source_dir``) for ``*.bpmn`` and
``*.bpmn20.xml`` documents and writes one Python module per generated type
under ``<output_dir>/<package/as/path>/``.

Malformed documents and unwritable units are reported and skipped; the run
continues and the exit code reflects the first problem encountered.

Examples:
  Generate into the configured output directory:

    $ bpmngen generate

  Preview what would be generated from another directory:

    $ bpmngen -v generate --dry-run processes/ --package app.generated
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from bpmngen.cli.cmd_common import build_config
from bpmngen.cli.errors import BpmngenDiscoveryError
from bpmngen.cli.options import CONTEXT_SETTINGS, common_config_options
from bpmngen.config import CollisionPolicy
from bpmngen.config.logging import get_logger
from bpmngen.core.diagnostics import DiagnosticLevel
from bpmngen.core.errors import DiscoveryError
from bpmngen.engine import generate
from bpmngen.writer import WriteStatus

if TYPE_CHECKING:
    from bpmngen.cli.console import ClickConsole
    from bpmngen.config import Config
    from bpmngen.engine import GenerationReport

logger = get_logger(__name__)


def render_report(
    console: ClickConsole, report: GenerationReport, config: Config, *, verbosity: int
) -> None:
    """Print per-unit lines (verbose or dry-run), diagnostics and a summary line."""
    if verbosity > 0 or config.dry_run:
        for write in report.writes:
            label = console.styled(f"{write.status.value:>9}", fg="green")
            console.print(f"{label}  {write.unit.qualified_name}  ({write.path})")

    for diagnostic in report.diagnostics:
        text = diagnostic.render(color=console.enable_color)
        if diagnostic.level is DiagnosticLevel.ERROR:
            console.error(text)
        else:
            console.warn(text)

    n_files = len(report.files)
    n_written = report.count(WriteStatus.WRITTEN)
    n_unchanged = report.count(WriteStatus.UNCHANGED)
    n_previewed = report.count(WriteStatus.PREVIEWED)
    if config.dry_run:
        summary = f"Would generate {n_previewed} unit(s) from {n_files} file(s) (dry run)."
    else:
        summary = (
            f"Generated {n_written} unit(s) ({n_unchanged} unchanged) "
            f"from {n_files} file(s) into {config.package_path}."
        )
    if report.stats.n_error:
        summary += f" {report.stats.n_error} error(s)."
    console.print(console.styled(summary, bold=True))


@click.command(
    name="generate",
    help="Generate service and interface stubs from BPMN process definitions.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("source_dir", required=False, type=click.Path(path_type=str))
@common_config_options
@click.option(
    "-o",
    "--output-dir",
    "output_dir",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    help="Root directory of the generated sources.",
)
@click.option(
    "-p",
    "--package",
    "package_name",
    default=None,
    help="Dotted Python package of the generated modules.",
)
@click.option(
    "--runtime-service",
    "runtime_service",
    default=None,
    help="'module:Name' of the runtime service injected into process services.",
)
@click.option(
    "-e",
    "--exclude",
    "exclude_patterns",
    multiple=True,
    help="Skip documents matching these gitignore-style patterns (relative to SOURCE_DIR).",
)
@click.option(
    "--on-collision",
    "collision_policy",
    type=click.Choice([p.value for p in CollisionPolicy]),
    default=None,
    help="What to do when two units generate the same module (default: warn).",
)
@click.option("--dry-run", "dry_run", is_flag=True, help="Render units without writing them.")
@click.option(
    "--no-init-files",
    "no_init_files",
    is_flag=True,
    help="Do not create __init__.py files in the generated package directories.",
)
def generate_command(
    *,
    source_dir: str | None,
    config_file: str | None,
    output_dir: str | None,
    package_name: str | None,
    runtime_service: str | None,
    exclude_patterns: tuple[str, ...],
    collision_policy: str | None,
    dry_run: bool,
    no_init_files: bool,
) -> None:
    """Run code generation and exit with the first error code encountered."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    args: dict[str, Any] = {
        "source_dir": source_dir,
        "output_dir": output_dir,
        "package_name": package_name,
        "runtime_service": runtime_service,
        "exclude_patterns": list(exclude_patterns),
        "collision_policy": collision_policy,
        "dry_run": True if dry_run else None,
        "write_init_files": False if no_init_files else None,
    }
    config: Config = build_config(config_file, args)
    logger.debug("Effective config: %s", config)

    try:
        report: GenerationReport = generate(config)
    except DiscoveryError as exc:
        raise BpmngenDiscoveryError(str(exc)) from exc

    render_report(console, report, config, verbosity=ctx.obj.get("verbosity_level", 0))

    if report.error_code is not None:
        ctx.exit(int(report.error_code))
