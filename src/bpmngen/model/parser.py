# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : parser.py
#   file_relpath : src/bpmngen/model/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse BPMN 2.0 XML into a `ProcessDefinitionDocument`.

Parsing goes through `defusedxml` with DTDs forbidden, so documents carrying a
DTD, entity declarations or external references are rejected as `ParseError`
instead of being expanded or fetched.

Service task implementations are read from the engine extension attributes
(Activiti, Camunda and Flowable dialects share the same attribute names):

    ``activiti:expression="${orderBean.processOrder()}"``
        -> ``implementation_type="expression"``
    ``camunda:delegateExpression="${orderDelegate}"``
        -> ``implementation_type="delegateExpression"``
    ``flowable:class="com.example.Delegate"``
        -> ``implementation_type="class"``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import defusedxml.ElementTree as ET  # noqa: N817
from defusedxml import DefusedXmlException

from bpmngen.config.logging import get_logger
from bpmngen.core.errors import ParseError
from bpmngen.model.document import (
    FlowElement,
    ParticipantDescriptor,
    ProcessDefinitionDocument,
    ProcessDescriptor,
    ServiceTask,
)

if TYPE_CHECKING:
    from pathlib import Path
    from xml.etree.ElementTree import Element

    from bpmngen.config.logging import BpmngenLogger

logger: BpmngenLogger = get_logger(__name__)

BPMN_NS = "http://www.omg.org/spec/BPMN/20100524/MODEL"

ENGINE_NAMESPACES: tuple[str, ...] = (
    "http://activiti.org/bpmn",
    "http://camunda.org/schema/1.0/bpmn",
    "http://flowable.org/bpmn",
)

# Engine attributes that bind a service task, in lookup order. Empty values count as absent.
IMPLEMENTATION_ATTRIBUTES: tuple[str, ...] = ("class", "expression", "delegateExpression")

# Local names of the BPMN elements that are flow elements of a process.
FLOW_ELEMENT_KINDS: frozenset[str] = frozenset(
    {
        "task",
        "userTask",
        "serviceTask",
        "scriptTask",
        "businessRuleTask",
        "sendTask",
        "receiveTask",
        "manualTask",
        "callActivity",
        "subProcess",
        "transaction",
        "adHocSubProcess",
        "exclusiveGateway",
        "parallelGateway",
        "inclusiveGateway",
        "eventBasedGateway",
        "complexGateway",
        "startEvent",
        "endEvent",
        "intermediateCatchEvent",
        "intermediateThrowEvent",
        "boundaryEvent",
        "sequenceFlow",
        "dataObject",
        "dataObjectReference",
        "dataStoreReference",
    }
)


def _bpmn(tag: str) -> str:
    return f"{{{BPMN_NS}}}{tag}"


def _local_name(tag: str) -> tuple[str | None, str]:
    """Split an ElementTree ``{namespace}local`` tag into its parts."""
    if tag.startswith("{"):
        ns, _, local = tag[1:].partition("}")
        return ns, local
    return None, tag


def _engine_attribute(elem: Element, name: str) -> str | None:
    for ns in ENGINE_NAMESPACES:
        value = elem.get(f"{{{ns}}}{name}")
        if value:
            return value
    return None


def _parse_executable(raw: str | None) -> bool:
    # Processes without an isExecutable attribute are executable.
    if raw is None:
        return True
    return raw.strip().lower() == "true"


def _parse_service_task(elem: Element, element_id: str) -> ServiceTask:
    implementation_type: str | None = None
    implementation: str | None = None

    for attribute in IMPLEMENTATION_ATTRIBUTES:
        value = _engine_attribute(elem, attribute)
        if value:
            implementation_type, implementation = attribute, value
            break
    else:
        task_type = _engine_attribute(elem, "type")
        if task_type is not None:
            implementation_type = task_type
        elif elem.get("implementation"):
            implementation_type = "webService"
            implementation = elem.get("implementation")

    return ServiceTask(
        id=element_id,
        kind="serviceTask",
        name=elem.get("name"),
        implementation_type=implementation_type,
        implementation=implementation,
    )


def _parse_flow_elements(process: Element) -> tuple[FlowElement, ...]:
    elements: list[FlowElement] = []
    for child in process:
        if not isinstance(child.tag, str):
            # Comments and processing instructions
            continue
        ns, kind = _local_name(child.tag)
        if ns != BPMN_NS or kind not in FLOW_ELEMENT_KINDS:
            continue
        element_id: str = child.get("id", "")
        if kind == "serviceTask":
            elements.append(_parse_service_task(child, element_id))
        else:
            elements.append(FlowElement(id=element_id, kind=kind, name=child.get("name")))
    return tuple(elements)


def _parse_process(elem: Element) -> ProcessDescriptor:
    process_id: str = (elem.get("id") or "").strip()
    if not process_id:
        raise ParseError("<process> element without an id")
    return ProcessDescriptor(
        id=process_id,
        name=elem.get("name"),
        executable=_parse_executable(elem.get("isExecutable")),
        flow_elements=_parse_flow_elements(elem),
    )


def parse_document(data: bytes, *, source: Path | None = None) -> ProcessDefinitionDocument:
    """Parse one BPMN 2.0 XML document.

    Args:
        data (bytes): Raw document bytes (the XML declaration decides the encoding).
        source (Path | None): Where the bytes came from; used for error messages only.

    Returns:
        ProcessDefinitionDocument: Processes and participants in document order.

    Raises:
        ParseError: If the document is not well-formed, names an encoding the
            XML parser cannot decode, declares a DTD or entities, or its root
            is not a BPMN 2.0 ``<definitions>`` element.
    """
    try:
        root: Element = ET.fromstring(data, forbid_dtd=True)
    except DefusedXmlException as exc:
        raise ParseError(f"Forbidden XML construct: {exc!r}", path=source) from exc
    except ET.ParseError as exc:
        raise ParseError(f"Malformed XML: {exc}", path=source) from exc
    except (ValueError, LookupError) as exc:
        # expat rejects multi-byte and unknown encodings named in the XML declaration
        raise ParseError(f"Unsupported encoding: {exc}", path=source) from exc

    if root.tag != _bpmn("definitions"):
        ns, local = _local_name(str(root.tag))
        raise ParseError(
            f"Unsupported schema: root element is '{local}' in namespace {ns!r}, "
            f"expected 'definitions' in {BPMN_NS!r}",
            path=source,
        )

    try:
        processes = tuple(_parse_process(elem) for elem in root.findall(_bpmn("process")))
    except ParseError as exc:
        raise ParseError(exc.reason, path=source) from exc

    participants = tuple(
        ParticipantDescriptor(name=elem.get("name"), process_ref=elem.get("processRef"))
        for collaboration in root.findall(_bpmn("collaboration"))
        for elem in collaboration.findall(_bpmn("participant"))
    )

    logger.debug(
        "Parsed %s: %d process(es), %d participant(s)",
        source or "<bytes>",
        len(processes),
        len(participants),
    )
    return ProcessDefinitionDocument(processes=processes, participants=participants, source=source)


def parse_file(path: Path) -> ProcessDefinitionDocument:
    """Read ``path`` and parse it with `parse_document`.

    Raises:
        ParseError: If the file cannot be read or parsed.
    """
    try:
        data: bytes = path.read_bytes()
    except OSError as exc:
        raise ParseError(f"Cannot read file: {exc}", path=path) from exc
    return parse_document(data, source=path)
