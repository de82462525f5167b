# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : __init__.py
#   file_relpath : src/bpmngen/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by the engine, the writer and the CLI."""
