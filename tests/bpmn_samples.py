# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : bpmn_samples.py
#   file_relpath : tests/bpmn_samples.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BPMN 2.0 documents shared by the parser, engine and CLI tests."""

from __future__ import annotations

from typing import Final

DEFINITIONS_OPEN: Final[str] = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<definitions xmlns="http://www.omg.org/spec/BPMN/20100524/MODEL"\n'
    '             xmlns:activiti="http://activiti.org/bpmn"\n'
    '             xmlns:camunda="http://camunda.org/schema/1.0/bpmn"\n'
    '             xmlns:flowable="http://flowable.org/bpmn"\n'
    '             targetNamespace="http://example.com/bpmn">\n'
)
DEFINITIONS_CLOSE: Final[str] = "</definitions>\n"


def definitions(body: str) -> str:
    """Wrap ``body`` in a BPMN 2.0 ``<definitions>`` root with the engine namespaces."""
    return DEFINITIONS_OPEN + body + DEFINITIONS_CLOSE


# A nameless process whose display name comes from its collaboration participant.
FLEET_PROCESS: Final[str] = definitions(
    """
  <collaboration id="Collaboration_1">
    <participant id="Participant_1" name="Obsluga Floty" processRef="Process_ObslugaFloty"/>
  </collaboration>
  <process id="Process_ObslugaFloty" isExecutable="true">
    <startEvent id="start"/>
    <serviceTask id="registerVehicle" name="Register vehicle"
                 activiti:expression="${fleetRegistry.registerVehicle()}"/>
    <sequenceFlow id="flow1" sourceRef="start" targetRef="registerVehicle"/>
    <serviceTask id="scheduleService" activiti:expression="${serviceScheduler.schedule()}"/>
    <serviceTask id="withArgs" activiti:expression="${serviceScheduler.schedule(execution)}"/>
    <serviceTask id="delegate" activiti:delegateExpression="${fleetDelegate}"/>
    <serviceTask id="javaClass" activiti:class="com.example.FleetDelegate"/>
    <endEvent id="end"/>
  </process>
"""
)

# A named process: participant names are ignored when the process has its own name.
ORDER_PROCESS: Final[str] = definitions(
    """
  <collaboration id="Collaboration_2">
    <participant id="Participant_2" name="Sales Desk" processRef="orderProcess"/>
  </collaboration>
  <process id="orderProcess" name="order-flow" isExecutable="true">
    <serviceTask id="process" camunda:expression="${orderBean.processOrder()}"/>
  </process>
"""
)

# One executable and one non-executable process.
MIXED_EXECUTABLE: Final[str] = definitions(
    """
  <process id="billing" name="Billing" isExecutable="true">
    <serviceTask id="invoice" flowable:expression="${invoiceService.issue()}"/>
  </process>
  <process id="archive" name="Archive" isExecutable="false">
    <serviceTask id="store" flowable:expression="${archiveService.store()}"/>
  </process>
"""
)

# Same bean and method as ORDER_PROCESS in a different file (identical interface).
ORDER_AUDIT_PROCESS: Final[str] = definitions(
    """
  <process id="orderAudit" name="Order Audit">
    <serviceTask id="process" activiti:expression="${orderBean.processOrder()}"/>
  </process>
"""
)

# Same bean as ORDER_PROCESS but another method: a different interface with the same name.
ORDER_CANCEL_PROCESS: Final[str] = definitions(
    """
  <process id="orderCancel" name="Order Cancel">
    <serviceTask id="cancel" activiti:expression="${orderBean.cancelOrder()}"/>
  </process>
"""
)

# Produces type names that are not Python identifiers: a leading digit and a dash.
INVALID_NAMES_PROCESS: Final[str] = definitions(
    """
  <process id="review" name="2nd Review" isExecutable="true">
    <serviceTask id="check" activiti:expression="${credit-check.run()}"/>
    <serviceTask id="notify" activiti:expression="${notifier.send()}"/>
  </process>
"""
)

MALFORMED: Final[str] = definitions(
    """
  <process id="broken" isExecutable="true">
    <serviceTask id="unclosed">
  </process>
"""
)

WRONG_ROOT: Final[str] = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<project xmlns="http://maven.apache.org/POM/4.0.0">\n'
    "  <modelVersion>4.0.0</modelVersion>\n"
    "</project>\n"
)

ENTITY_EXPANSION: Final[str] = (
    '<?xml version="1.0"?>\n'
    '<!DOCTYPE definitions [\n'
    '  <!ENTITY lol "lol">\n'
    '  <!ENTITY lol2 "&lol;&lol;&lol;&lol;&lol;&lol;&lol;&lol;&lol;&lol;">\n'
    "]>\n"
    '<definitions xmlns="http://www.omg.org/spec/BPMN/20100524/MODEL">\n'
    '  <process id="p" name="&lol2;"/>\n'
    "</definitions>\n"
)
