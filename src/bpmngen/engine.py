# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : engine.py
#   file_relpath : src/bpmngen/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Drive code generation over a list of process-definition documents.

This module provides CLI-free functions shared by the command line and API
callers. Per file the engine goes through::

    Discovered -> Parsed -> ProcessesExtracted -> UnitsEmitted
               \\-> ParseFailed

Design goals:
  - No CLI dependencies: presentation (printing, colors, exit) belongs to
    ``bpmngen.cli``.
  - Partial-failure isolation: a `ParseError` skips its file and a `WriteError`
    skips its unit; both are recorded in the `GenerationReport` and logged,
    and processing continues.
  - Only discovery failures (`DiscoveryError`) propagate out of `generate`.

Typical usage:

    report = generate(config)
    if report.error_code is not None:
        ...
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bpmngen.config.logging import get_logger
from bpmngen.config.types import CollisionPolicy
from bpmngen.core.diagnostics import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticStats,
    compute_diagnostic_stats,
)
from bpmngen.core.errors import MappingCollisionError, ParseError, WriteError
from bpmngen.core.exit_codes import ExitCode
from bpmngen.expressions import match_service_task
from bpmngen.file_resolver import discover_process_files
from bpmngen.mapper import map_binding_to_interface, map_process_to_service
from bpmngen.model.parser import parse_file
from bpmngen.naming import resolve_process_name
from bpmngen.writer import UnitWriter, WriteStatus, select_sink

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from bpmngen.config import Config
    from bpmngen.config.logging import BpmngenLogger
    from bpmngen.model.document import ProcessDefinitionDocument
    from bpmngen.units import GeneratedUnit
    from bpmngen.writer import WriteResult, WriteSink

logger: BpmngenLogger = get_logger(__name__)


@dataclass
class FileResult:
    """What happened to one discovered document."""

    path: Path
    units: list[GeneratedUnit] = field(default_factory=list)
    writes: list[WriteResult] = field(default_factory=list)
    parse_error: ParseError | None = None

    @property
    def parsed(self) -> bool:
        """Return True if the document was parsed."""
        return self.parse_error is None


@dataclass
class GenerationReport:
    """Outcome of one generation run.

    Attributes:
        files (list[FileResult]): One entry per processed document, in order.
        diagnostics (list[Diagnostic]): Parse, write and collision problems (plus
            config diagnostics), in the order they occurred.
        error_code (ExitCode | None): The first non-success exit code encountered,
            or None when every file and unit went through.
    """

    files: list[FileResult] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    error_code: ExitCode | None = None

    def _record(self, level: DiagnosticLevel, message: str, path: Path | None) -> None:
        self.diagnostics.append(Diagnostic(level, message, path))

    def record_error(self, message: str, code: ExitCode, path: Path | None = None) -> None:
        """Record an error diagnostic and remember the first error code."""
        self._record(DiagnosticLevel.ERROR, message, path)
        self.error_code = self.error_code or code

    def record_warning(self, message: str, path: Path | None = None) -> None:
        """Record a warning diagnostic."""
        self._record(DiagnosticLevel.WARNING, message, path)

    @property
    def units(self) -> list[GeneratedUnit]:
        """Return every unit extracted during the run, in emission order."""
        return [unit for result in self.files for unit in result.units]

    @property
    def writes(self) -> list[WriteResult]:
        """Return every successful write, in order."""
        return [write for result in self.files for write in result.writes]

    @property
    def parse_errors(self) -> list[ParseError]:
        """Return the parse errors of the skipped documents."""
        return [r.parse_error for r in self.files if r.parse_error is not None]

    @property
    def stats(self) -> DiagnosticStats:
        """Return diagnostic counts per level."""
        return compute_diagnostic_stats(self.diagnostics)

    def count(self, status: WriteStatus) -> int:
        """Return the number of writes that ended with ``status``."""
        return sum(1 for write in self.writes if write.status is status)


def extract_units(document: ProcessDefinitionDocument, *, config: Config) -> list[GeneratedUnit]:
    """Map a parsed document onto generated units.

    For each executable process, in document order: one service unit, then one
    interface unit per service task whose expression is a bean method call, in
    flow-element order. Non-matching service tasks are skipped silently.

    Args:
        document (ProcessDefinitionDocument): The parsed document.
        config (Config): Supplies the package name and runtime service reference.

    Returns:
        list[GeneratedUnit]: Units in emission order.
    """
    units: list[GeneratedUnit] = []
    for process in document.executable_processes():
        display_name: str = resolve_process_name(process, document)
        logger.info("Found process: %s - %s", process.id, display_name)
        units.append(
            map_process_to_service(
                process.id,
                display_name,
                package_name=config.package_name,
                runtime_service=config.runtime_service,
                source=document.source,
            )
        )

        for task in process.service_tasks():
            binding = match_service_task(task)
            if binding is None:
                logger.debug("Service task %s is not a bean method call; skipped", task.id)
                continue
            units.append(
                map_binding_to_interface(
                    binding.bean_name,
                    binding.method_name,
                    package_name=config.package_name,
                    source=document.source,
                )
            )
    return units


class GenerationRun:
    """Stateful driver for one run: owns the writer and the targets written so far.

    Args:
        config (Config): Immutable run configuration.
        sink (WriteSink | None): Destination of rendered units; defaults to the
            sink selected by `select_sink`.
    """

    def __init__(self, config: Config, sink: WriteSink | None = None) -> None:
        self.config = config
        self.writer = UnitWriter(sink if sink is not None else select_sink(config))
        self.report = GenerationReport()
        self._written: dict[tuple[str, str], GeneratedUnit] = {}
        for diagnostic in config.diagnostics:
            self.report.diagnostics.append(diagnostic)

    def _check_collision(self, unit: GeneratedUnit) -> bool:
        """Return True if ``unit`` should be written, applying the collision policy."""
        previous = self._written.get(unit.target)
        if previous is None:
            return True
        if dataclasses.replace(previous, source=None) == dataclasses.replace(unit, source=None):
            logger.debug("%s already generated with identical content", unit.qualified_name)
            return False

        collision = MappingCollisionError(unit, previous_source=previous.source)
        policy: CollisionPolicy = self.config.collision_policy
        if policy is CollisionPolicy.ERROR:
            logger.error("%s", collision)
            self.report.record_error(str(collision), ExitCode.COLLISION_ERROR, unit.source)
            return False
        if policy is CollisionPolicy.WARN:
            logger.warning("%s; overwriting", collision)
            self.report.record_warning(f"{collision}; overwritten", unit.source)
        else:
            logger.debug("%s; overwriting", collision)
        return True

    def emit(self, unit: GeneratedUnit, result: FileResult) -> None:
        """Write one unit, recording write failures instead of raising them."""
        try:
            if not self._check_collision(unit):
                return
            write: WriteResult = self.writer.write(unit)
        except WriteError as exc:
            logger.error("Failed to write generated %s: %s", unit.kind.value, exc)
            self.report.record_error(str(exc), ExitCode.WRITE_ERROR, unit.source)
            return

        self._written[unit.target] = unit
        result.writes.append(write)
        logger.info("%s %s -> %s", write.status.value.capitalize(), unit.qualified_name, write.path)

    def process_file(self, path: Path) -> FileResult:
        """Parse ``path`` and emit its units; parse failures are recorded, not raised."""
        logger.info("Processing BPMN file: %s", path)
        result = FileResult(path=path)
        self.report.files.append(result)

        try:
            document = parse_file(path)
        except ParseError as exc:
            logger.error("Failed to read BPMN file %s: %s", path, exc.reason)
            result.parse_error = exc
            self.report.record_error(exc.reason, ExitCode.PARSE_ERROR, path)
            return result

        result.units = extract_units(document, config=self.config)
        for unit in result.units:
            self.emit(unit, result)
        return result


def run_generation(
    files: Sequence[Path],
    config: Config,
    *,
    sink: WriteSink | None = None,
) -> GenerationReport:
    """Generate code for each file, in the given order.

    Args:
        files (Sequence[Path]): Process-definition documents to process.
        config (Config): The run configuration.
        sink (WriteSink | None): Override the sink chosen from ``config``.

    Returns:
        GenerationReport: Per-file results, diagnostics and the first error code.
    """
    run = GenerationRun(config, sink)
    for path in files:
        run.process_file(path)

    logger.info(
        "Processed %d file(s): %d unit(s), %d error(s)",
        len(run.report.files),
        len(run.report.writes),
        run.report.stats.n_error,
    )
    return run.report


def generate(config: Config, *, sink: WriteSink | None = None) -> GenerationReport:
    """Discover documents under ``config.source_dir`` and generate code for them.

    Raises:
        DiscoveryError: If the source root cannot be scanned.
    """
    logger.info("Source directory: %s", config.source_dir)
    logger.info("Output directory: %s", config.output_dir)
    logger.info("Package name: %s", config.package_name)
    files: list[Path] = discover_process_files(config)
    return run_generation(files, config, sink=sink)
