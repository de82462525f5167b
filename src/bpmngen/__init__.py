# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : __init__.py
#   file_relpath : src/bpmngen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BPMN Codegen package.

bpmngen scans a source tree for BPMN 2.0 process definitions and generates a
Python service class per executable process plus an abstract interface per
``${bean.method()}`` service task expression. It exposes both a CLI and a small
typed API (`bpmngen.engine.generate`) for build automation.
"""

from __future__ import annotations
