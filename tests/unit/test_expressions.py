# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : test_expressions.py
#   file_relpath : tests/unit/test_expressions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for bean method call recognition in `bpmngen.expressions`."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from bpmngen.expressions import ServiceBinding, match_binding, match_service_task
from bpmngen.model import ServiceTask
from tests.conftest import parametrize


@parametrize(
    "implementation, expected",
    [
        ("${orderBean.processOrder()}", ServiceBinding("orderBean", "processOrder")),
        ("${a.b()}", ServiceBinding("a", "b")),
        ("${order-bean.run()}", ServiceBinding("order-bean", "run")),
        ("${ spaced .call()}", ServiceBinding(" spaced ", "call")),
    ],
)
def test_bean_method_calls_match(implementation: str, expected: ServiceBinding) -> None:
    """``${bean.method()}`` yields the bean and method names verbatim."""
    assert match_binding("expression", implementation) == expected


@parametrize(
    "implementation",
    [
        "${orderBean.processOrder(execution)}",
        "${orderBean.processOrder}",
        "${a.b.c()}",
        "${orderBean()}",
        "${.run()}",
        "${bean.()}",
        "orderBean.processOrder()",
        "#{orderBean.processOrder()}",
        " ${orderBean.processOrder()}",
        "${orderBean.processOrder()} ",
        "",
    ],
)
def test_other_expressions_do_not_match(implementation: str) -> None:
    """Anything but a full, argument-less single-dot call is not a binding."""
    assert match_binding("expression", implementation) is None


@parametrize(
    "implementation_type",
    ["delegateExpression", "class", "webService", "Expression", None],
)
def test_only_expression_type_matches(implementation_type: str | None) -> None:
    """The implementation type must be exactly ``expression``."""
    assert match_binding(implementation_type, "${orderBean.processOrder()}") is None


def test_missing_implementation() -> None:
    assert match_binding("expression", None) is None


def test_match_service_task() -> None:
    """The shortcut reads the task's implementation fields."""
    task = ServiceTask(
        id="t1",
        kind="serviceTask",
        implementation_type="expression",
        implementation="${invoiceService.issue()}",
    )

    assert match_service_task(task) == ServiceBinding("invoiceService", "issue")


IDENT = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,15}", fullmatch=True)


@given(bean=IDENT, method=IDENT)
def test_identifier_pairs_always_match(bean: str, method: str) -> None:
    """Every identifier pair round-trips through the expression form."""
    assert match_binding("expression", f"${{{bean}.{method}()}}") == ServiceBinding(bean, method)
