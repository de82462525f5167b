# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : loaders.py
#   file_relpath : src/bpmngen/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading bpmngen configuration from
on-disk TOML files (``bpmngen.toml`` / ``[tool.bpmngen]`` in ``pyproject.toml``)
and for rendering an effective configuration back to TOML text.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from bpmngen.config.logging import get_logger
from bpmngen.constants import BPMNGEN_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from bpmngen.core.diagnostics import Diagnostic, DiagnosticLevel

if TYPE_CHECKING:
    from pathlib import Path

    from bpmngen.config.logging import BpmngenLogger

TomlTable = dict[str, Any]

logger: BpmngenLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> tuple[TomlTable, list[Diagnostic]]:
    """Read a TOML file and return its top-level table as a plain dict.

    Unreadable or malformed files do not raise: an empty table is returned
    together with a warning diagnostic.

    Args:
        path (Path): The TOML file to read.

    Returns:
        tuple[TomlTable, list[Diagnostic]]: The parsed table and any diagnostics.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read config file %s: %s", path, exc)
        return {}, [Diagnostic(DiagnosticLevel.WARNING, f"Cannot read config file: {exc}", path)]

    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        logger.warning("Invalid TOML in %s: %s", path, exc)
        return {}, [Diagnostic(DiagnosticLevel.WARNING, f"Invalid TOML: {exc}", path)]

    table = cast("TomlTable", doc.unwrap())
    logger.debug("Loaded TOML from %s: %s", path, table)
    return table, []


def extract_tool_section(table: TomlTable) -> TomlTable | None:
    """Return the ``[tool.bpmngen]`` table of a ``pyproject.toml`` document, if present."""
    node: Any = table
    for key in PYPROJECT_TOOL_SECTION:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return cast("TomlTable", node) if isinstance(node, dict) else None


def load_config_table(path: Path) -> tuple[TomlTable, list[Diagnostic]]:
    """Return the bpmngen settings table declared in ``path``.

    For ``pyproject.toml`` the ``[tool.bpmngen]`` section is used; any other
    file is read as a bpmngen config file whose top level holds the settings.
    """
    table, diagnostics = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        section = extract_tool_section(table)
        if section is None:
            logger.debug("No [tool.bpmngen] section in %s", path)
            return {}, diagnostics
        return section, diagnostics
    return table, diagnostics


def discover_config_file(directory: Path) -> Path | None:
    """Return the config file to use for ``directory``, or None.

    ``bpmngen.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it declares a ``[tool.bpmngen]`` section.
    """
    candidate: Path = directory / BPMNGEN_TOML_NAME
    if candidate.is_file():
        return candidate

    candidate = directory / PYPROJECT_TOML_NAME
    if candidate.is_file():
        table, _ = load_toml_dict(candidate)
        if extract_tool_section(table) is not None:
            return candidate
    return None


def to_toml(table: TomlTable) -> str:
    """Render a plain dict as TOML text using `tomlkit`."""
    doc = tomlkit.document()
    for key, value in table.items():
        doc.add(key, value)
    return tomlkit.dumps(doc)
