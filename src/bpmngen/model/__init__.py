# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : __init__.py
#   file_relpath : src/bpmngen/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory model of process-definition documents and the parser that builds it."""

from __future__ import annotations

from bpmngen.model.document import (
    FlowElement,
    ParticipantDescriptor,
    ProcessDefinitionDocument,
    ProcessDescriptor,
    ServiceTask,
)
from bpmngen.model.parser import parse_document, parse_file

__all__ = [
    "FlowElement",
    "ParticipantDescriptor",
    "ProcessDefinitionDocument",
    "ProcessDescriptor",
    "ServiceTask",
    "parse_document",
    "parse_file",
]
