# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : cmd_common.py
#   file_relpath : src/bpmngen/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from bpmngen.cli.errors import BpmngenConfigError
from bpmngen.config import MutableConfig
from bpmngen.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from bpmngen.config import Config


def build_config(config_file: str | None, args: Mapping[str, Any] | None = None) -> Config:
    """Merge defaults, the config file and CLI ``args`` into a frozen `Config`.

    Raises:
        BpmngenConfigError: If the merged configuration is invalid.
    """
    try:
        draft = MutableConfig.load_merged(
            config_file=Path(config_file) if config_file else None,
            args=args,
        )
        return draft.freeze()
    except ConfigError as exc:
        raise BpmngenConfigError(str(exc)) from exc
