# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : runtime.py
#   file_relpath : src/bpmngen/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime protocols that generated process services depend on.

Generated services receive a `RuntimeService` in their constructor; any engine
client with a matching ``start_process_instance_by_key`` method satisfies it.
Point ``runtime_service`` in the configuration elsewhere to use another type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class ProcessInstance(Protocol):
    """A started process instance."""

    @property
    def id(self) -> str:
        """Return the engine-assigned instance id."""
        ...


@runtime_checkable
class RuntimeService(Protocol):
    """Starts process instances by process definition key."""

    def start_process_instance_by_key(
        self, process_key: str, variables: Mapping[str, Any]
    ) -> ProcessInstance:
        """Start a new instance of the process ``process_key`` with ``variables``."""
        ...
