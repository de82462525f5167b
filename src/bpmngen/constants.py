# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : constants.py
#   file_relpath : src/bpmngen/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""bpmngen constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    BPMNGEN_VERSION: str = get_version("bpmn-codegen")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    BPMNGEN_VERSION = "0.0.0"

# File name suffixes recognized as process-definition documents.
PROCESS_FILE_SUFFIXES: tuple[str, ...] = (".bpmn", ".bpmn20.xml")

# Suffix appended to the PascalCase process name of generated services.
SERVICE_TYPE_SUFFIX: str = "ProcessService"

# Extension of generated source files.
GENERATED_FILE_SUFFIX: str = ".py"

# Configuration file names, in discovery order.
PYPROJECT_TOML_NAME: str = "pyproject.toml"
BPMNGEN_TOML_NAME: str = "bpmngen.toml"
PYPROJECT_TOOL_SECTION: tuple[str, ...] = ("tool", "bpmngen")

DEFAULT_SOURCE_DIR: str = "src/main/resources/bpmn"
DEFAULT_OUTPUT_DIR: str = "build/generated-sources/bpmn"
DEFAULT_PACKAGE_NAME: str = "generated"
DEFAULT_RUNTIME_SERVICE: str = "bpmngen.runtime:RuntimeService"
