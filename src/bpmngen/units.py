# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : units.py
#   file_relpath : src/bpmngen/units.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Language-neutral declarations produced by the mapper.

A `GeneratedUnit` describes the *shape* of one generated type: its name, its
operations and the collaborators it needs injected. How that shape becomes
source text is up to `bpmngen.rendering`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class UnitKind(Enum):
    """Kind of generated type."""

    SERVICE = "service"
    INTERFACE = "interface"


@dataclass(frozen=True)
class TypeRef:
    """A type expression plus the ``(module, name)`` imports it needs."""

    expression: str
    imports: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class Parameter:
    """An operation parameter."""

    name: str
    type: TypeRef


@dataclass(frozen=True)
class ParameterRef:
    """Invocation argument forwarding an operation parameter."""

    name: str


@dataclass(frozen=True)
class LiteralArg:
    """Invocation argument given as a constant string."""

    value: str


@dataclass(frozen=True)
class Invocation:
    """Delegation of an operation to a method of an injected collaborator.

    Attributes:
        collaborator (str): Attribute name of the collaborator.
        method (str): Method called on the collaborator.
        arguments (tuple[ParameterRef | LiteralArg, ...]): Call arguments, in order.
        result_attribute (str | None): Attribute of the call result that is
            returned, or None to return the result itself.
    """

    collaborator: str
    method: str
    arguments: tuple[ParameterRef | LiteralArg, ...] = ()
    result_attribute: str | None = None


@dataclass(frozen=True)
class Operation:
    """A method declared by a generated unit.

    An abstract operation has no invocation; a concrete one delegates through
    its `Invocation`. ``returns=None`` means no return type is declared.
    """

    name: str
    parameters: tuple[Parameter, ...] = ()
    returns: TypeRef | None = None
    abstract: bool = False
    invocation: Invocation | None = None


@dataclass(frozen=True)
class Collaborator:
    """Capability tag: the unit needs an injected collaborator of ``type``."""

    attribute: str
    type: TypeRef


@dataclass(frozen=True)
class GeneratedUnit:
    """One generated type, ready to be rendered and written.

    Attributes:
        package_name (str): Dotted package of the generated module.
        type_name (str): Name of the generated type (also the module name).
        kind (UnitKind): Service class or abstract interface.
        operations (tuple[Operation, ...]): Declared methods, in order.
        collaborators (tuple[Collaborator, ...]): Injected dependencies.
        origin (str): What the unit was generated from (process id or bean name).
        source (Path | None): The process-definition document it came from.
    """

    package_name: str
    type_name: str
    kind: UnitKind
    operations: tuple[Operation, ...] = ()
    collaborators: tuple[Collaborator, ...] = ()
    origin: str = ""
    source: Path | None = None

    @property
    def qualified_name(self) -> str:
        """Return ``package.TypeName``."""
        return f"{self.package_name}.{self.type_name}" if self.package_name else self.type_name

    @property
    def target(self) -> tuple[str, str]:
        """Return the ``(package_name, type_name)`` key that identifies the written module."""
        return self.package_name, self.type_name

    def relative_path(self, suffix: str) -> PurePosixPath:
        """Return ``<package/as/path>/<TypeName><suffix>``."""
        parts = [p for p in self.package_name.split(".") if p]
        return PurePosixPath(*parts, f"{self.type_name}{suffix}")
