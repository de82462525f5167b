# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : __init__.py
#   file_relpath : src/bpmngen/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration package: immutable `Config`, its `MutableConfig` builder and TOML I/O."""

from __future__ import annotations

from bpmngen.config.model import Config, MutableConfig
from bpmngen.config.types import ArgsLike, CollisionPolicy

__all__ = [
    "ArgsLike",
    "CollisionPolicy",
    "Config",
    "MutableConfig",
]
