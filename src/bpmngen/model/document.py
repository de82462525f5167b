# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : document.py
#   file_relpath : src/bpmngen/model/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured, immutable model of one process-definition document.

Only the parts of BPMN 2.0 that code generation needs are modelled: processes,
collaboration participants and the flow elements of each process. Every flow
node is kept (as a `FlowElement` tagged with its BPMN element kind) so ordering
is preserved, but only `ServiceTask` carries extra data.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class FlowElement:
    """A flow node of a process (task, event, gateway, sub-process, ...)."""

    id: str
    kind: str
    name: str | None = None


@dataclass(frozen=True)
class ServiceTask(FlowElement):
    """A service task and the way it is bound to business logic.

    Attributes:
        implementation_type (str | None): How the task is implemented, e.g.
            ``"expression"``, ``"delegateExpression"``, ``"class"``.
        implementation (str | None): The implementation reference, e.g.
            ``"${orderBean.processOrder()}"`` for an expression.
    """

    implementation_type: str | None = None
    implementation: str | None = None


@dataclass(frozen=True)
class ProcessDescriptor:
    """A ``<process>`` declaration."""

    id: str
    name: str | None = None
    executable: bool = True
    flow_elements: tuple[FlowElement, ...] = ()

    def service_tasks(self) -> Iterator[ServiceTask]:
        """Yield the service tasks of this process in document order."""
        for element in self.flow_elements:
            if isinstance(element, ServiceTask):
                yield element


@dataclass(frozen=True)
class ParticipantDescriptor:
    """A collaboration participant; ``process_ref`` weakly references a process id."""

    name: str | None
    process_ref: str | None


@dataclass(frozen=True)
class ProcessDefinitionDocument:
    """The parsed representation of one input file."""

    processes: tuple[ProcessDescriptor, ...] = ()
    participants: tuple[ParticipantDescriptor, ...] = ()
    source: Path | None = None

    def executable_processes(self) -> Iterator[ProcessDescriptor]:
        """Yield the processes marked executable, in document order."""
        return (process for process in self.processes if process.executable)
