# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : errors.py
#   file_relpath : src/bpmngen/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the bpmngen CLI.

Raise these in commands to stop with a styled message and a sysexits-aligned
exit code (see `bpmngen.core.exit_codes.ExitCode`).
"""

from __future__ import annotations

from typing import IO, Any

import click

from bpmngen.core.exit_codes import ExitCode


class BpmngenCliError(click.ClickException):
    """Base class for all bpmngen CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class BpmngenUsageError(BpmngenCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BpmngenConfigError(BpmngenCliError):
    """Error for configuration errors (invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class BpmngenDiscoveryError(BpmngenCliError):
    """Error when the source directory cannot be scanned."""

    exit_code = ExitCode.DISCOVERY_ERROR
