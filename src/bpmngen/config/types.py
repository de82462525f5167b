# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : types.py
#   file_relpath : src/bpmngen/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API argument dicts.
    - `CollisionPolicy`: what to do when two generated units target the same
      ``(package_name, type_name)`` during one run.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class CollisionPolicy(str, Enum):
    """Available policies for output type name collisions within one run."""

    WARN = "warn"
    ERROR = "error"
    OVERWRITE = "overwrite"

    @classmethod
    def from_name(cls, key_name: str | None) -> CollisionPolicy | None:
        """Find the CollisionPolicy member by its case-insensitive name.

        Args:
            key_name (str | None): The string name of the member (e.g., "warn") or None.

        Returns:
            CollisionPolicy | None: The matching member or None if the key is None or unmatched.
        """
        if key_name is None:
            return None
        return cls.__members__.get(key_name.strip().upper())
