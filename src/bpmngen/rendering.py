# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : rendering.py
#   file_relpath : src/bpmngen/rendering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render generated units as Python modules.

Service units become plain classes whose constructor receives the injected
collaborators and whose operations delegate to them. Interface units become
`abc.ABC` subclasses with one ``@abstractmethod`` per operation.

Rendering is deterministic: imports are grouped (``__future__``, standard
library, everything else) and sorted, so re-running the generator on unchanged
input produces byte-identical files.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol

from bpmngen.constants import BPMNGEN_VERSION, GENERATED_FILE_SUFFIX
from bpmngen.units import LiteralArg, UnitKind

if TYPE_CHECKING:
    from bpmngen.units import GeneratedUnit, Invocation, Operation

INDENT: str = "    "


class Renderer(Protocol):
    """Turns a `GeneratedUnit` into source text."""

    suffix: str

    def render(self, unit: GeneratedUnit) -> str:
        """Return the full source text of ``unit``."""
        ...


def _is_stdlib(module: str) -> bool:
    return module.split(".")[0] in sys.stdlib_module_names


def _import_block(imports: set[tuple[str, str]]) -> list[str]:
    by_module: dict[str, set[str]] = {}
    for module, name in imports:
        by_module.setdefault(module, set()).add(name)

    stdlib = sorted(m for m in by_module if _is_stdlib(m))
    others = sorted(m for m in by_module if not _is_stdlib(m))

    lines: list[str] = ["from __future__ import annotations", ""]
    for group in (stdlib, others):
        if not group:
            continue
        lines.extend(f"from {m} import {', '.join(sorted(by_module[m]))}" for m in group)
        lines.append("")
    return lines


def _render_call(invocation: Invocation) -> str:
    args = ", ".join(
        repr(arg.value) if isinstance(arg, LiteralArg) else arg.name
        for arg in invocation.arguments
    )
    call = f"self.{invocation.collaborator}.{invocation.method}({args})"
    if invocation.result_attribute:
        call = f"{call}.{invocation.result_attribute}"
    return call


def _render_signature(operation: Operation) -> str:
    params = ", ".join(["self", *(f"{p.name}: {p.type.expression}" for p in operation.parameters)])
    returns = f" -> {operation.returns.expression}" if operation.returns is not None else ""
    return f"def {operation.name}({params}){returns}:"


class PythonRenderer:
    """Render units as Python 3 modules."""

    suffix: str = GENERATED_FILE_SUFFIX

    def render(self, unit: GeneratedUnit) -> str:
        """Return the module source for ``unit``."""
        imports: set[tuple[str, str]] = set()
        for operation in unit.operations:
            for parameter in operation.parameters:
                imports.update(parameter.type.imports)
            if operation.returns is not None:
                imports.update(operation.returns.imports)
        for collaborator in unit.collaborators:
            imports.update(collaborator.type.imports)

        if unit.kind is UnitKind.INTERFACE:
            imports.update({("abc", "ABC"), ("abc", "abstractmethod")})
            body = self._render_interface(unit)
        else:
            body = self._render_service(unit)

        origin = f" from {unit.source.name}" if unit.source is not None else ""
        header = [
            f"# Generated by bpmngen {BPMNGEN_VERSION}{origin}. Do not edit.",
            f'"""{self._summary(unit)}"""',
            "",
        ]
        return "\n".join([*header, *_import_block(imports), "", *body]) + "\n"

    @staticmethod
    def _summary(unit: GeneratedUnit) -> str:
        origin = repr(unit.origin).replace('"', '\\"')
        if unit.kind is UnitKind.SERVICE:
            return f"Start instances of process {origin}."
        return f"Contract of bean {origin} called by service tasks."

    def _render_service(self, unit: GeneratedUnit) -> list[str]:
        lines = [f"class {unit.type_name}:", f'{INDENT}"""{self._summary(unit)}"""', ""]

        if unit.collaborators:
            params = ", ".join(f"{c.attribute}: {c.type.expression}" for c in unit.collaborators)
            lines.append(f"{INDENT}def __init__(self, {params}) -> None:")
            lines.extend(
                f"{INDENT * 2}self.{c.attribute} = {c.attribute}" for c in unit.collaborators
            )
            lines.append("")

        for operation in unit.operations:
            lines.append(f"{INDENT}{_render_signature(operation)}")
            if operation.invocation is not None:
                lines.append(f"{INDENT * 2}return {_render_call(operation.invocation)}")
            else:
                lines.append(f"{INDENT * 2}raise NotImplementedError")
            lines.append("")
        return lines[:-1]

    def _render_interface(self, unit: GeneratedUnit) -> list[str]:
        lines = [f"class {unit.type_name}(ABC):", f'{INDENT}"""{self._summary(unit)}"""', ""]
        for operation in unit.operations:
            lines.append(f"{INDENT}@abstractmethod")
            lines.append(f"{INDENT}{_render_signature(operation)}")
            lines.append(f"{INDENT * 2}...")
            lines.append("")
        return lines[:-1]
