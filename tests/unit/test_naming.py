# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : test_naming.py
#   file_relpath : tests/unit/test_naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for display-name resolution and identifier casing in `bpmngen.naming`."""

from __future__ import annotations

import string

from hypothesis import given
from hypothesis import strategies as st

from bpmngen.model import ParticipantDescriptor, ProcessDefinitionDocument, ProcessDescriptor
from bpmngen.naming import resolve_process_name, to_interface_name, to_pascal_case
from tests.conftest import parametrize


@parametrize(
    "text, expected",
    [
        ("Obsluga Floty", "ObslugaFloty"),
        ("order-flow_two words", "OrderFlowTwoWords"),
        ("ORDER FLOW", "OrderFlow"),
        ("  leading and  double  spaces ", "LeadingAndDoubleSpaces"),
        ("tab\tand\nnewline", "TabAndNewline"),
        ("Process_ObslugaFloty", "ProcessObslugafloty"),
        ("2nd review", "2ndReview"),
        ("straße", "Straße"),
        ("", ""),
        (" -_ ", ""),
    ],
)
def test_to_pascal_case(text: str, expected: str) -> None:
    """Words are split on whitespace, dashes and underscores and re-cased."""
    assert to_pascal_case(text) == expected


@parametrize(
    "bean, expected",
    [
        ("orderBean", "OrderBean"),
        ("OrderBean", "OrderBean"),
        ("x", "X"),
        ("ßbean", "ßbean"),
        ("", ""),
    ],
)
def test_to_interface_name(bean: str, expected: str) -> None:
    """Only the first character changes; camelCase humps are kept."""
    assert to_interface_name(bean) == expected


WORD = st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=20)


@given(word=WORD)
def test_pascal_case_single_word_idempotent(word: str) -> None:
    """Casing a single word twice gives the same result as casing it once."""
    once = to_pascal_case(word)

    assert to_pascal_case(once) == once
    assert len(once) == len(word)


@given(words=st.lists(WORD, min_size=1, max_size=5), sep=st.sampled_from([" ", "-", "_", "\t"]))
def test_pascal_case_drops_separators(words: list[str], sep: str) -> None:
    """The result never contains separators and keeps every other character."""
    result = to_pascal_case(sep.join(words))

    assert sep not in result
    assert len(result) == sum(len(w) for w in words)


def _document(*participants: tuple[str | None, str | None]) -> ProcessDefinitionDocument:
    return ProcessDefinitionDocument(
        processes=(ProcessDescriptor(id="Process_ObslugaFloty"),),
        participants=tuple(ParticipantDescriptor(name=n, process_ref=r) for n, r in participants),
    )


def test_resolve_declared_name_wins() -> None:
    """A non-empty process name is used even when a participant references it."""
    process = ProcessDescriptor(id="orderProcess", name="Order Flow")
    doc = ProcessDefinitionDocument(
        processes=(process,),
        participants=(ParticipantDescriptor(name="Sales Desk", process_ref="orderProcess"),),
    )

    assert resolve_process_name(process, doc) == "Order Flow"


def test_resolve_participant_name() -> None:
    """A nameless process takes the name of the participant referencing it."""
    doc = _document(("Other", "Process_Other"), ("Fleet Handling", "Process_ObslugaFloty"))

    assert resolve_process_name(doc.processes[0], doc) == "Fleet Handling"


def test_resolve_first_matching_participant() -> None:
    """With several matching participants, the first in document order wins."""
    doc = _document(("First", "Process_ObslugaFloty"), ("Second", "Process_ObslugaFloty"))

    assert resolve_process_name(doc.processes[0], doc) == "First"


@parametrize(
    "participants",
    [
        (),
        (("Other", "Process_Other"),),
        ((None, "Process_ObslugaFloty"), ("Later", "Process_ObslugaFloty")),
        (("", "Process_ObslugaFloty"),),
    ],
)
def test_resolve_falls_back_to_id(participants: tuple[tuple[str | None, str | None], ...]) -> None:
    """Without a named first matching participant, the process id is used."""
    doc = _document(*participants)

    assert resolve_process_name(doc.processes[0], doc) == "Process_ObslugaFloty"


def test_resolve_empty_declared_name() -> None:
    """An empty declared name counts as absent."""
    process = ProcessDescriptor(id="p1", name="")
    doc = ProcessDefinitionDocument(
        processes=(process,),
        participants=(ParticipantDescriptor(name="Named", process_ref="p1"),),
    )

    assert resolve_process_name(process, doc) == "Named"
