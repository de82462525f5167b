# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : writer.py
#   file_relpath : src/bpmngen/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Persist rendered units to a sink.

This module is the single place where generated source reaches a destination.
The engine hands every `GeneratedUnit` to `UnitWriter.write`, which validates
it, renders it and passes the text to a sink.

Sinks
-----
- FileSystemSink: writes ``<output_dir>/<package/as/path>/<TypeName>.py`` and
  (optionally) the ``__init__.py`` files that make the package importable.
- NullSink: no-op (dry-run).
- MemorySink: keeps the rendered text in a dict (API callers and tests).

Every failure surfaces as `WriteError`; the engine records it and moves on.
"""

from __future__ import annotations

import keyword
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Protocol

from bpmngen.config.logging import get_logger
from bpmngen.core.errors import WriteError
from bpmngen.rendering import PythonRenderer

if TYPE_CHECKING:
    from bpmngen.config import Config
    from bpmngen.config.logging import BpmngenLogger
    from bpmngen.rendering import Renderer
    from bpmngen.units import GeneratedUnit

logger: BpmngenLogger = get_logger(__name__)

INIT_MODULE_TEXT: str = '"""Generated by bpmngen."""\n'


class WriteStatus(Enum):
    """Outcome of writing one unit."""

    WRITTEN = "written"
    UNCHANGED = "unchanged"
    PREVIEWED = "previewed"


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    unit: GeneratedUnit
    path: PurePosixPath | Path
    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for the destinations of rendered units."""

    def write(self, unit: GeneratedUnit, relpath: PurePosixPath, text: str) -> WriteResult:
        """Persist ``text`` for ``unit`` at ``relpath`` (relative to the sink's root).

        Raises:
            WriteError: If the text cannot be persisted.
        """
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, unit: GeneratedUnit, relpath: PurePosixPath, text: str) -> WriteResult:
        """No-op write for dry-run mode."""
        logger.debug("NullSink: would write %d chars to %s", len(text), relpath)
        return WriteResult(unit=unit, path=relpath, status=WriteStatus.PREVIEWED)


@dataclass
class MemorySink:
    """Sink that keeps rendered modules in memory, keyed by relative path."""

    files: dict[PurePosixPath, str] = field(default_factory=dict)

    def write(self, unit: GeneratedUnit, relpath: PurePosixPath, text: str) -> WriteResult:
        """Store ``text`` under ``relpath``; later writes replace earlier ones."""
        status = WriteStatus.UNCHANGED if self.files.get(relpath) == text else WriteStatus.WRITTEN
        self.files[relpath] = text
        return WriteResult(
            unit=unit, path=relpath, status=status, bytes_written=len(text.encode("utf-8"))
        )


class FileSystemSink:
    """Filesystem sink that writes below ``output_dir``.

    Args:
        output_dir (Path): Root of the generated sources.
        write_init_files (bool): Create a missing ``__init__.py`` in every package
            directory between ``output_dir`` and the written module.
    """

    def __init__(self, output_dir: Path, *, write_init_files: bool = True) -> None:
        self.output_dir = output_dir
        self.write_init_files = write_init_files

    def _ensure_package(self, relpath: PurePosixPath) -> None:
        directory: Path = self.output_dir
        directory.mkdir(parents=True, exist_ok=True)
        for part in relpath.parent.parts:
            directory = directory / part
            directory.mkdir(exist_ok=True)
            init_file = directory / "__init__.py"
            if self.write_init_files and not init_file.exists():
                init_file.write_text(INIT_MODULE_TEXT, encoding="utf-8")
                logger.debug("FileSystemSink: created %s", init_file)

    def write(self, unit: GeneratedUnit, relpath: PurePosixPath, text: str) -> WriteResult:
        """Write ``text`` to ``output_dir / relpath`` unless it already holds ``text``."""
        path: Path = self.output_dir.joinpath(*relpath.parts)
        try:
            self._ensure_package(relpath)
            if path.is_file() and path.read_text(encoding="utf-8") == text:
                logger.debug("FileSystemSink: %s is up to date", path)
                return WriteResult(unit=unit, path=path, status=WriteStatus.UNCHANGED)
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except (OSError, UnicodeDecodeError) as exc:
            raise WriteError(unit, str(exc), path=path) from exc

        bytes_written: int = len(text.encode("utf-8"))
        logger.debug("FileSystemSink: wrote %d bytes to file %s", bytes_written, path)
        return WriteResult(
            unit=unit, path=path, status=WriteStatus.WRITTEN, bytes_written=bytes_written
        )


def _check_identifier(unit: GeneratedUnit, what: str, name: str) -> None:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise WriteError(unit, f"{what} {name!r} is not a valid Python identifier")


def validate_unit(unit: GeneratedUnit) -> None:
    """Reject units that cannot be written as an importable module.

    Raises:
        WriteError: If the type name or an operation name is not a valid identifier.
    """
    _check_identifier(unit, "type name", unit.type_name)
    for operation in unit.operations:
        _check_identifier(unit, "operation name", operation.name)


class UnitWriter:
    """Validate, render and persist generated units.

    Args:
        sink (WriteSink): Destination of the rendered text.
        renderer (Renderer | None): Source renderer (defaults to `PythonRenderer`).
    """

    def __init__(self, sink: WriteSink, renderer: Renderer | None = None) -> None:
        self.sink = sink
        self.renderer: Renderer = renderer or PythonRenderer()

    def render(self, unit: GeneratedUnit) -> str:
        """Return the source text of ``unit`` without writing it."""
        return self.renderer.render(unit)

    def write(self, unit: GeneratedUnit, text: str | None = None) -> WriteResult:
        """Write ``unit`` (rendering it first unless ``text`` is given).

        Raises:
            WriteError: If the unit is invalid or the sink fails.
        """
        validate_unit(unit)
        if text is None:
            text = self.render(unit)
        return self.sink.write(unit, unit.relative_path(self.renderer.suffix), text)


def select_sink(config: Config) -> WriteSink:
    """Return the sink matching ``config``: `NullSink` for dry runs, else `FileSystemSink`."""
    if config.dry_run:
        logger.debug("Selected NULL sink (config.dry_run is True)")
        return NullSink()
    logger.debug("Selected file system sink for %s", config.output_dir)
    return FileSystemSink(config.output_dir, write_init_files=config.write_init_files)
