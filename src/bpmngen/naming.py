# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : naming.py
#   file_relpath : src/bpmngen/naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display-name resolution and identifier casing.

`resolve_process_name` picks the human-facing name of a process with a fixed
fallback order (declared name, first matching participant, process id).

`to_pascal_case` and `to_interface_name` turn such names into type names.
Case mapping is applied one character at a time and only when it yields a
single character (``"ß".upper()`` is ``"SS"``, so ``ß`` is kept as is), so the
length of a name never changes when it is cased.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bpmngen.config.logging import get_logger

if TYPE_CHECKING:
    from bpmngen.config.logging import BpmngenLogger
    from bpmngen.model.document import ProcessDefinitionDocument, ProcessDescriptor

logger: BpmngenLogger = get_logger(__name__)

WORD_SEPARATORS: frozenset[str] = frozenset("-_")


def _upper(char: str) -> str:
    mapped = char.upper()
    return mapped if len(mapped) == 1 else char


def _lower(char: str) -> str:
    mapped = char.lower()
    return mapped if len(mapped) == 1 else char


def _is_separator(char: str) -> bool:
    return char.isspace() or char in WORD_SEPARATORS


def to_pascal_case(text: str) -> str:
    """Return ``text`` in PascalCase.

    ``text`` is split on whitespace, ``-`` and ``_``; each word gets its first
    character upper-cased and the rest lower-cased, and the words are joined
    without separators.

    Examples:
        >>> to_pascal_case("order-flow_two words")
        'OrderFlowTwoWords'
        >>> to_pascal_case("Obsluga Floty")
        'ObslugaFloty'
    """
    out: list[str] = []
    word_start = True
    for char in text:
        if _is_separator(char):
            word_start = True
        elif word_start:
            out.append(_upper(char))
            word_start = False
        else:
            out.append(_lower(char))
    return "".join(out)


def to_interface_name(bean_name: str) -> str:
    """Upper-case the first character of ``bean_name`` and keep the rest untouched.

    ``"orderBean"`` becomes ``"OrderBean"``; this is deliberately not
    `to_pascal_case`, which would turn it into ``"Orderbean"``.
    """
    if not bean_name:
        return ""
    return _upper(bean_name[0]) + bean_name[1:]


def resolve_process_name(process: ProcessDescriptor, document: ProcessDefinitionDocument) -> str:
    """Return the display name of ``process``.

    Precedence:
        1. The process's own non-empty ``name``.
        2. The name of the first participant, in document order, whose
           ``process_ref`` is the process id, unless that name is empty.
        3. The process id.

    The result is never empty because the parser rejects processes without an id.
    """
    if process.name:
        return process.name

    participant = next(
        (p for p in document.participants if p.process_ref == process.id),
        None,
    )
    if participant is not None and participant.name:
        logger.debug(
            "Process %s has no name; using participant name %r", process.id, participant.name
        )
        return participant.name

    logger.debug("Process %s has no name and no named participant; using its id", process.id)
    return process.id
