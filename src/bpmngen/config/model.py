# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : model.py
#   file_relpath : src/bpmngen/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot read by the engine and the writer.
    - `MutableConfig`: a mutable builder used while layering defaults, a TOML
      config file and CLI/API overrides; it is frozen into `Config` once and
      thawed back for edits.

Precedence (lowest to highest):
    1. Built-in defaults (see `bpmngen.constants`).
    2. The config file: an explicit ``--config FILE``, otherwise ``bpmngen.toml``
       or the ``[tool.bpmngen]`` section of ``pyproject.toml`` in the working
       directory.
    3. CLI/API arguments (``ArgsLike`` mapping; ``None`` values are ignored).

Path semantics:
    - Paths declared in a config file are resolved against that file's directory.
    - Paths given on the CLI or through the API are resolved against the CWD.
"""

from __future__ import annotations

import keyword
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from bpmngen.config.loaders import discover_config_file, load_config_table, to_toml
from bpmngen.config.logging import get_logger
from bpmngen.config.types import CollisionPolicy
from bpmngen.constants import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_RUNTIME_SERVICE,
    DEFAULT_SOURCE_DIR,
)
from bpmngen.core.diagnostics import Diagnostic, DiagnosticLevel
from bpmngen.core.errors import ConfigError

if TYPE_CHECKING:
    from bpmngen.config.loaders import TomlTable
    from bpmngen.config.logging import BpmngenLogger
    from bpmngen.config.types import ArgsLike

logger: BpmngenLogger = get_logger(__name__)


def is_valid_package_name(name: str) -> bool:
    """Return True if ``name`` is a dotted sequence of non-keyword Python identifiers."""
    if not name:
        return False
    return all(part.isidentifier() and not keyword.iskeyword(part) for part in name.split("."))


def split_runtime_service(ref: str) -> tuple[str, str]:
    """Split a ``module:Name`` reference into its module and attribute parts.

    Raises:
        ConfigError: If ``ref`` is not of the form ``module:Name``.
    """
    module, sep, name = ref.partition(":")
    if not sep or not is_valid_package_name(module) or not name.isidentifier():
        raise ConfigError(f"Invalid runtime_service reference '{ref}' (expected 'module:Name').")
    return module, name


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    This snapshot is produced by `MutableConfig.freeze` after merging defaults,
    the config file and CLI/API overrides. It is set once per run and only read
    afterwards, so it can be handed to the engine and the writer freely.

    Attributes:
        source_dir (Path): Root directory scanned for process-definition documents.
        output_dir (Path): Root directory under which generated modules are written.
        package_name (str): Dotted Python package of the generated modules.
        runtime_service (str): ``module:Name`` of the runtime service type that
            generated process services receive by injection.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns, relative to
            ``source_dir``, of documents to skip.
        collision_policy (CollisionPolicy): Behavior when two units target the
            same module within a run.
        write_init_files (bool): Whether package directories under ``output_dir``
            receive an ``__init__.py`` so generated modules are importable.
        dry_run (bool): Render units without writing them.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings encountered while loading
            and merging config.
    """

    source_dir: Path
    output_dir: Path
    package_name: str
    runtime_service: str = DEFAULT_RUNTIME_SERVICE
    exclude_patterns: tuple[str, ...] = ()
    collision_policy: CollisionPolicy = CollisionPolicy.WARN
    write_init_files: bool = True
    dry_run: bool = False
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def package_path(self) -> Path:
        """Return the directory that receives the generated modules (``output_dir/pkg/path``)."""
        return self.output_dir.joinpath(*self.package_name.split("."))

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config for edits."""
        return MutableConfig(
            source_dir=self.source_dir,
            output_dir=self.output_dir,
            package_name=self.package_name,
            runtime_service=self.runtime_service,
            exclude_patterns=list(self.exclude_patterns),
            collision_policy=self.collision_policy,
            write_init_files=self.write_init_files,
            dry_run=self.dry_run,
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this config into a TOML-serializable dict (``bpmngen.toml`` layout)."""
        return {
            "source_dir": str(self.source_dir),
            "output_dir": str(self.output_dir),
            "package_name": self.package_name,
            "runtime_service": self.runtime_service,
            "exclude_patterns": list(self.exclude_patterns),
            "collision_policy": self.collision_policy.value,
            "write_init_files": self.write_init_files,
        }

    def to_toml(self) -> str:
        """Render this config as TOML text."""
        return to_toml(self.to_toml_dict())


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Fields left as ``None`` fall back to the built-in defaults on `freeze`.
    """

    source_dir: Path | None = None
    output_dir: Path | None = None
    package_name: str | None = None
    runtime_service: str | None = None
    exclude_patterns: list[str] = field(default_factory=list)
    collision_policy: CollisionPolicy | None = None
    write_init_files: bool | None = None
    dry_run: bool | None = None
    config_files: list[Path] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @classmethod
    def from_defaults(cls, base: Path | None = None) -> MutableConfig:
        """Return a builder populated with the built-in defaults, anchored at ``base``."""
        base = (base or Path.cwd()).resolve()
        return cls(
            source_dir=base / DEFAULT_SOURCE_DIR,
            output_dir=base / DEFAULT_OUTPUT_DIR,
            package_name=DEFAULT_PACKAGE_NAME,
            runtime_service=DEFAULT_RUNTIME_SERVICE,
            collision_policy=CollisionPolicy.WARN,
            write_init_files=True,
            dry_run=False,
        )

    def _warn(self, message: str, path: Path | None = None) -> None:
        logger.warning("%s%s", f"{path}: " if path else "", message)
        self.diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message, path))

    def apply_toml(self, table: TomlTable, *, config_file: Path) -> MutableConfig:
        """Merge the settings of a config-file table into this builder.

        Values of the wrong type and unknown keys are reported as warning
        diagnostics and otherwise ignored.

        Args:
            table (TomlTable): The bpmngen settings table.
            config_file (Path): The file the table was read from; relative paths
                are resolved against its directory.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        base: Path = config_file.resolve().parent
        self.config_files.append(config_file)

        for key, value in table.items():
            if key in ("source_dir", "output_dir"):
                if not isinstance(value, str):
                    self._warn(f"'{key}' must be a string, got {type(value).__name__}", config_file)
                    continue
                setattr(self, key, (base / value).resolve())
            elif key in ("package_name", "runtime_service"):
                if not isinstance(value, str):
                    self._warn(f"'{key}' must be a string, got {type(value).__name__}", config_file)
                    continue
                setattr(self, key, value)
            elif key == "exclude_patterns":
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    self._warn("'exclude_patterns' must be a list of strings", config_file)
                    continue
                self.exclude_patterns.extend(value)
            elif key == "collision_policy":
                policy = CollisionPolicy.from_name(value) if isinstance(value, str) else None
                if policy is None:
                    raise ConfigError(f"{config_file}: invalid collision_policy {value!r}")
                self.collision_policy = policy
            elif key == "write_init_files":
                if not isinstance(value, bool):
                    self._warn("'write_init_files' must be a boolean", config_file)
                    continue
                self.write_init_files = value
            else:
                self._warn(f"Unknown config key '{key}' ignored", config_file)
        return self

    def apply_args(self, args: ArgsLike, *, cwd: Path | None = None) -> MutableConfig:
        """Merge CLI/API overrides; ``None`` values leave the current setting untouched.

        Args:
            args (ArgsLike): Mapping with any of the `Config` field names.
            cwd (Path | None): Base for relative paths (defaults to the CWD).

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        base: Path = (cwd or Path.cwd()).resolve()

        for key in ("source_dir", "output_dir"):
            raw = args.get(key)
            if raw is not None:
                setattr(self, key, (base / Path(raw)).resolve())
        for key in ("package_name", "runtime_service"):
            if args.get(key) is not None:
                setattr(self, key, str(args[key]))
        exclude: Any = args.get("exclude_patterns")
        if exclude:
            self.exclude_patterns.extend(exclude)
        policy: Any = args.get("collision_policy")
        if policy is not None:
            resolved: CollisionPolicy | None = (
                policy
                if isinstance(policy, CollisionPolicy)
                else CollisionPolicy.from_name(str(policy))
            )
            if resolved is None:
                raise ConfigError(f"Invalid collision policy {policy!r}")
            self.collision_policy = resolved
        for key in ("write_init_files", "dry_run"):
            if args.get(key) is not None:
                setattr(self, key, bool(args[key]))
        return self

    def freeze(self) -> Config:
        """Validate and return the immutable runtime `Config`.

        Raises:
            ConfigError: If the package name or runtime service reference is invalid.
        """
        defaults = MutableConfig.from_defaults()
        package_name: str = (
            self.package_name if self.package_name is not None else DEFAULT_PACKAGE_NAME
        )
        if not is_valid_package_name(package_name):
            raise ConfigError(f"Invalid package name '{package_name}'.")
        runtime_service: str = self.runtime_service or DEFAULT_RUNTIME_SERVICE
        split_runtime_service(runtime_service)

        return Config(
            source_dir=self.source_dir or defaults.source_dir or Path(DEFAULT_SOURCE_DIR),
            output_dir=self.output_dir or defaults.output_dir or Path(DEFAULT_OUTPUT_DIR),
            package_name=package_name,
            runtime_service=runtime_service,
            exclude_patterns=tuple(dict.fromkeys(self.exclude_patterns)),
            collision_policy=self.collision_policy or CollisionPolicy.WARN,
            write_init_files=True if self.write_init_files is None else self.write_init_files,
            dry_run=bool(self.dry_run),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        args: Mapping[str, Any] | None = None,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Build a config from defaults, a config file and overrides.

        Args:
            config_file (Path | None): Explicit config file; when None, one is
                discovered in ``cwd`` (see `discover_config_file`).
            args (Mapping[str, Any] | None): CLI/API overrides.
            cwd (Path | None): Working directory (defaults to the process CWD).

        Returns:
            MutableConfig: The merged builder, ready to `freeze`.
        """
        cwd = (cwd or Path.cwd()).resolve()
        draft = cls.from_defaults(cwd)

        source: Path | None = config_file if config_file is not None else discover_config_file(cwd)
        if source is not None:
            table, diagnostics = load_config_table(source)
            draft.diagnostics.extend(diagnostics)
            draft.apply_toml(table, config_file=source)
            logger.info("Using config file %s", source)

        if args:
            draft.apply_args(args, cwd=cwd)
        return draft
