# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : __main__.py
#   file_relpath : src/bpmngen/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running bpmngen via ``python -m bpmngen``.

Equivalent to the ``bpmngen`` console script.

Examples:
    Generate from the configured source directory::

        python -m bpmngen generate
"""

from __future__ import annotations

from bpmngen.cli.main import cli

if __name__ == "__main__":
    cli()
