# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : mapper.py
#   file_relpath : src/bpmngen/mapper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Map resolved processes and service bindings onto generated units.

Both mapping functions are pure and deterministic. They never fail: an empty
display or bean name gives an empty type name, which the writer reports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bpmngen.config.model import split_runtime_service
from bpmngen.constants import DEFAULT_PACKAGE_NAME, DEFAULT_RUNTIME_SERVICE, SERVICE_TYPE_SUFFIX
from bpmngen.naming import to_interface_name, to_pascal_case
from bpmngen.units import (
    Collaborator,
    GeneratedUnit,
    Invocation,
    LiteralArg,
    Operation,
    Parameter,
    ParameterRef,
    TypeRef,
    UnitKind,
)

if TYPE_CHECKING:
    from pathlib import Path

START_OPERATION_NAME: str = "start_process"
VARIABLES_PARAMETER: str = "variables"
RUNTIME_SERVICE_ATTRIBUTE: str = "runtime_service"

VARIABLES_TYPE = TypeRef(
    "Mapping[str, Any]",
    imports=(("collections.abc", "Mapping"), ("typing", "Any")),
)
INSTANCE_ID_TYPE = TypeRef("str")


def service_type_name(display_name: str) -> str:
    """Return the type name of the service generated for a process called ``display_name``."""
    return to_pascal_case(display_name) + SERVICE_TYPE_SUFFIX


def map_process_to_service(
    process_id: str,
    display_name: str,
    *,
    package_name: str = DEFAULT_PACKAGE_NAME,
    runtime_service: str = DEFAULT_RUNTIME_SERVICE,
    source: Path | None = None,
) -> GeneratedUnit:
    """Return the service unit that starts instances of process ``process_id``.

    The unit is named ``PascalCase(display_name) + "ProcessService"``, needs an
    injected runtime service and declares ``start_process(variables) -> str``,
    which starts the process by key and returns the new instance id.
    """
    module, name = split_runtime_service(runtime_service)
    start = Operation(
        name=START_OPERATION_NAME,
        parameters=(Parameter(VARIABLES_PARAMETER, VARIABLES_TYPE),),
        returns=INSTANCE_ID_TYPE,
        invocation=Invocation(
            collaborator=RUNTIME_SERVICE_ATTRIBUTE,
            method="start_process_instance_by_key",
            arguments=(LiteralArg(process_id), ParameterRef(VARIABLES_PARAMETER)),
            result_attribute="id",
        ),
    )
    return GeneratedUnit(
        package_name=package_name,
        type_name=service_type_name(display_name),
        kind=UnitKind.SERVICE,
        operations=(start,),
        collaborators=(
            Collaborator(RUNTIME_SERVICE_ATTRIBUTE, TypeRef(name, imports=((module, name),))),
        ),
        origin=process_id,
        source=source,
    )


def map_binding_to_interface(
    bean_name: str,
    method_name: str,
    *,
    package_name: str = DEFAULT_PACKAGE_NAME,
    source: Path | None = None,
) -> GeneratedUnit:
    """Return the interface unit for bean ``bean_name``.

    The unit is named after the bean with its first character upper-cased and
    declares exactly one abstract, parameterless operation ``method_name``
    without a declared return type.
    """
    return GeneratedUnit(
        package_name=package_name,
        type_name=to_interface_name(bean_name),
        kind=UnitKind.INTERFACE,
        operations=(Operation(name=method_name, abstract=True),),
        origin=bean_name,
        source=source,
    )
