# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : expressions.py
#   file_relpath : src/bpmngen/expressions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recognize ``${bean.method()}`` service task expressions.

Only the no-argument bean method call form produces a `ServiceBinding`:

    ``${orderBean.processOrder()}``   -> ``ServiceBinding("orderBean", "processOrder")``
    ``${orderBean.processOrder(1)}``  -> None (arguments)
    ``${a.b.c()}``                    -> None (more than one dot)
    ``orderBean.processOrder()``      -> None (no ``${}`` wrapper)

A task that does not match is not an error: process files freely mix bean calls
with delegates, classes, scripts and other expressions.

The method group is ``[^.(]+`` rather than ``[^(]+``: a dotted method part is
rejected on purpose, not by accident.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from bpmngen.config.logging import get_logger

if TYPE_CHECKING:
    from bpmngen.config.logging import BpmngenLogger
    from bpmngen.model.document import ServiceTask

logger: BpmngenLogger = get_logger(__name__)

EXPRESSION_IMPLEMENTATION_TYPE: Final[str] = "expression"

# The method part also excludes dots: ``${a.b.c()}`` is a property path, not a bean call.
SERVICE_TASK_EXPRESSION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\$\{([^.]+)\.([^.(]+)\(\)\}"
)


@dataclass(frozen=True)
class ServiceBinding:
    """A bean method referenced by a service task expression."""

    bean_name: str
    method_name: str


def match_binding(
    implementation_type: str | None, implementation: str | None
) -> ServiceBinding | None:
    """Return the binding declared by a service task implementation, if any.

    Args:
        implementation_type (str | None): Must be exactly ``"expression"``.
        implementation (str | None): Must fully match ``${bean.method()}``.

    Returns:
        ServiceBinding | None: The bean and method names, or None when the task
            is not a bean method call expression.
    """
    if implementation is None or implementation_type != EXPRESSION_IMPLEMENTATION_TYPE:
        return None
    match = SERVICE_TASK_EXPRESSION_PATTERN.fullmatch(implementation)
    if match is None:
        logger.trace("Expression %r is not a bean method call", implementation)
        return None
    return ServiceBinding(bean_name=match.group(1), method_name=match.group(2))


def match_service_task(task: ServiceTask) -> ServiceBinding | None:
    """Shortcut for `match_binding` on a parsed `ServiceTask`."""
    return match_binding(task.implementation_type, task.implementation)
