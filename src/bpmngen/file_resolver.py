# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : file_resolver.py
#   file_relpath : src/bpmngen/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discover process-definition documents below the configured source root.

The resolver walks ``config.source_dir`` recursively, keeps files whose names
end in ``.bpmn`` or ``.bpmn20.xml``, subtracts the configured exclude patterns
(gitignore semantics, relative to the source root) and returns a sorted list
so runs are deterministic.

A missing source root is not an error (there is simply nothing to generate);
a source root that exists but cannot be scanned raises `DiscoveryError`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from bpmngen.config.logging import get_logger
from bpmngen.constants import PROCESS_FILE_SUFFIXES
from bpmngen.core.errors import DiscoveryError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bpmngen.config import Config
    from bpmngen.config.logging import BpmngenLogger

logger: BpmngenLogger = get_logger(__name__)


def is_process_file(path: Path) -> bool:
    """Return True if ``path`` has a process-definition file name suffix."""
    return path.name.endswith(PROCESS_FILE_SUFFIXES)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _walk(root: Path) -> Iterable[Path]:
    def _on_error(exc: OSError) -> None:
        raise DiscoveryError(root, str(exc)) from exc

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames.sort()
        for filename in filenames:
            yield Path(dirpath) / filename


def discover_process_files(config: Config) -> list[Path]:
    """Return the process-definition documents to process, in a stable order.

    Args:
        config (Config): Supplies ``source_dir`` and ``exclude_patterns``.

    Returns:
        list[Path]: Sorted list of files selected for processing.

    Raises:
        DiscoveryError: If the source root is not a directory or cannot be walked.
    """
    root: Path = config.source_dir
    logger.debug("discover_process_files(): root=%s excludes=%s", root, config.exclude_patterns)

    if not root.exists():
        logger.warning("Source directory %s does not exist, skipping code generation.", root)
        return []
    if not root.is_dir():
        raise DiscoveryError(root, "not a directory")

    candidates: set[Path] = {p for p in _walk(root) if is_process_file(p) and p.is_file()}

    if config.exclude_patterns:
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(config.exclude_patterns))
        excluded = {p for p in candidates if spec.match_file(_rel_for_match(p, root))}
        for p in sorted(excluded):
            logger.info("Excluded by pattern: %s", p)
        candidates -= excluded

    files: list[Path] = sorted(candidates)
    logger.trace("Files to process: %d -- %s", len(files), files)
    return files
