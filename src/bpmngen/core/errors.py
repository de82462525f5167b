# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : errors.py
#   file_relpath : src/bpmngen/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for bpmngen.

Only `DiscoveryError` is fatal for a run. `ParseError`, `WriteError` and
`MappingCollisionError` are caught by the engine, recorded as diagnostics in the
`GenerationReport` and processing continues with the next file or unit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from bpmngen.units import GeneratedUnit


class BpmngenError(Exception):
    """Base class for all bpmngen errors."""


class ConfigError(BpmngenError):
    """Invalid configuration value (package name, collision policy, ...)."""


class DiscoveryError(BpmngenError):
    """The source root cannot be scanned for process-definition files."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"Cannot scan '{root}' for process definitions: {reason}")
        self.root = root
        self.reason = reason


class ParseError(BpmngenError):
    """A process-definition document is malformed or uses an unsupported schema."""

    def __init__(self, reason: str, *, path: Path | None = None) -> None:
        where = f"{path}: " if path is not None else ""
        super().__init__(f"{where}{reason}")
        self.path = path
        self.reason = reason


class WriteError(BpmngenError):
    """A generated unit cannot be persisted."""

    def __init__(self, unit: GeneratedUnit, reason: str, *, path: Path | None = None) -> None:
        super().__init__(f"Cannot write '{unit.qualified_name}': {reason}")
        self.unit = unit
        self.path = path
        self.reason = reason


class MappingCollisionError(BpmngenError):
    """Two different units resolve to the same ``(package_name, type_name)``."""

    def __init__(self, unit: GeneratedUnit, *, previous_source: Path | None) -> None:
        origin = f" (first generated from {previous_source})" if previous_source else ""
        super().__init__(f"'{unit.qualified_name}' was already generated in this run{origin}")
        self.unit = unit
        self.previous_source = previous_source
