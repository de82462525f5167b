# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : test_rendering.py
#   file_relpath : tests/unit/test_rendering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `bpmngen.rendering.PythonRenderer`.

Rendered modules are compiled and executed, so these tests check that the
generated code actually runs, not only how it looks.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

from bpmngen.constants import BPMNGEN_VERSION
from bpmngen.mapper import map_binding_to_interface, map_process_to_service
from bpmngen.rendering import PythonRenderer
from bpmngen.runtime import ProcessInstance, RuntimeService


def _exec_module(text: str) -> dict[str, Any]:
    namespace: dict[str, Any] = {"__name__": "generated_under_test"}
    exec(compile(text, "<generated>", "exec"), namespace)  # noqa: S102
    return namespace


@dataclass
class FakeInstance:
    id: str


class FakeRuntime:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def start_process_instance_by_key(
        self, process_key: str, variables: Any
    ) -> FakeInstance:
        self.calls.append((process_key, dict(variables)))
        return FakeInstance(id=f"{process_key}:1")


def test_fake_runtime_satisfies_protocols() -> None:
    runtime = FakeRuntime()

    assert isinstance(runtime, RuntimeService)
    assert isinstance(runtime.start_process_instance_by_key("k", {}), ProcessInstance)


def test_service_module_runs() -> None:
    """The service delegates to the runtime service and returns the instance id."""
    unit = map_process_to_service(
        "Process_ObslugaFloty", "Obsluga Floty", source=Path("fleet.bpmn")
    )
    text = PythonRenderer().render(unit)

    namespace = _exec_module(text)
    service_cls = namespace["ObslugaFlotyProcessService"]
    runtime = FakeRuntime()
    service = service_cls(runtime)

    assert service.start_process({"vehicle": "WX 1234"}) == "Process_ObslugaFloty:1"
    assert runtime.calls == [("Process_ObslugaFloty", {"vehicle": "WX 1234"})]


def test_service_module_layout() -> None:
    """Header line, grouped imports and signatures are stable."""
    unit = map_process_to_service(
        "Process_ObslugaFloty", "Obsluga Floty", source=Path("/x/fleet.bpmn")
    )
    lines = PythonRenderer().render(unit).splitlines()

    assert lines[0] == f"# Generated by bpmngen {BPMNGEN_VERSION} from fleet.bpmn. Do not edit."
    assert lines[1] == "\"\"\"Start instances of process 'Process_ObslugaFloty'.\"\"\""
    imports = [line for line in lines if line.startswith("from ")]
    assert imports == [
        "from __future__ import annotations",
        "from collections.abc import Mapping",
        "from typing import Any",
        "from bpmngen.runtime import RuntimeService",
    ]
    assert "class ObslugaFlotyProcessService:" in lines
    assert "    def __init__(self, runtime_service: RuntimeService) -> None:" in lines
    assert "    def start_process(self, variables: Mapping[str, Any]) -> str:" in lines


def test_interface_module_is_abstract() -> None:
    """The interface is an ABC with one parameterless abstract method."""
    unit = map_binding_to_interface("orderBean", "processOrder")
    text = PythonRenderer().render(unit)

    assert text.startswith(f"# Generated by bpmngen {BPMNGEN_VERSION}. Do not edit.\n")
    assert "from abc import ABC, abstractmethod" in text

    interface = _exec_module(text)["OrderBean"]
    assert interface.__abstractmethods__ == frozenset({"processOrder"})
    assert list(inspect.signature(interface.processOrder).parameters) == ["self"]
    with pytest.raises(TypeError):
        interface()

    class Impl(interface):  # type: ignore[misc, valid-type]
        def processOrder(self) -> str:  # noqa: N802
            return "done"

    assert Impl().processOrder() == "done"


def test_render_is_deterministic() -> None:
    renderer = PythonRenderer()
    unit = map_process_to_service("p", "P", runtime_service="zeta.rt:Rt", package_name="a.b")

    assert renderer.render(unit) == renderer.render(unit)
    assert renderer.render(unit).endswith("\n")


def test_custom_runtime_service_import() -> None:
    """A third-party runtime service is imported after the standard library."""
    unit = map_process_to_service("p", "P", runtime_service="acme.engine:Engine")
    imports = [
        line for line in PythonRenderer().render(unit).splitlines() if line.startswith("from ")
    ]

    assert imports[-1] == "from acme.engine import Engine"


def test_quotes_in_origin_stay_inside_docstring() -> None:
    unit = map_binding_to_interface('say"hi"', "run")

    _exec_module(PythonRenderer().render(unit).replace('class Say"hi"', "class SayHi"))
    assert '\\"' in PythonRenderer().render(unit)
