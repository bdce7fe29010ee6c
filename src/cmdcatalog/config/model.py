# topmark:header:start
#
#   project      : CmdCatalog
#   file         : model.py
#   file_relpath : src/cmdcatalog/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the catalog pipeline.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (later wins):
    1. built-in defaults ([`load_defaults_dict`][cmdcatalog.config.loaders.load_defaults_dict]);
    2. the discovered or explicit config file;
    3. CLI arguments.

Path semantics:
    - Source paths and the output path declared in a config file are
      normalized against that config file's directory.
    - CLI paths are kept as given (relative to the invocation CWD).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cmdcatalog.config.keys import Toml
from cmdcatalog.config.loaders import (
    discover_config_file,
    extract_config_table,
    load_defaults_dict,
    load_toml_dict,
)
from cmdcatalog.config.logging import get_logger
from cmdcatalog.constants import DEFAULT_MARKER_NAME, STDOUT_PATH
from cmdcatalog.rendering.formats import CatalogFormat

if TYPE_CHECKING:
    from cmdcatalog.config.loaders import TomlTable
    from cmdcatalog.config.logging import CatalogLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: CatalogLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for CmdCatalog.

    Attributes:
        output_format (CatalogFormat): Selected catalog format.
        plugin_prefix (str | None): Dotted prefix before ``.plugin.`` in package
            names; None accepts any prefix.
        marker_name (str): Decorator name recognized by the static scanner.
        output (str): Output file path, or ``"-"`` for stdout.
        source_paths (tuple[Path, ...]): Roots scanned statically.
        source_modules (tuple[str, ...]): Modules imported and inspected.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns skipped by the scanner.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
        verbosity_level (int): Program-output verbosity (0 = terse).
    """

    output_format: CatalogFormat = CatalogFormat.TEXT
    plugin_prefix: str | None = None
    marker_name: str = DEFAULT_MARKER_NAME
    output: str = STDOUT_PATH
    source_paths: tuple[Path, ...] = ()
    source_modules: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    config_files: tuple[Path, ...] = ()
    verbosity_level: int = 0

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            output_format=self.output_format.value,
            plugin_prefix=self.plugin_prefix,
            marker_name=self.marker_name,
            output=self.output,
            source_paths=list(self.source_paths),
            source_modules=list(self.source_modules),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
            verbosity_level=self.verbosity_level,
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "not set at this layer" so that merging only overrides what a
    layer actually declares.

    Attributes:
        output_format (str | None): Raw format selection value.
        plugin_prefix (str | None): Plugin package prefix ("" accepts any prefix).
        marker_name (str | None): Decorator name recognized by the scanner.
        output (str | None): Output path or ``"-"``.
        source_paths (list[Path]): Roots to scan.
        source_modules (list[str]): Modules to import.
        exclude_patterns (list[str]): Scanner exclude patterns.
        config_files (list[Path]): Provenance.
        verbosity_level (int | None): Program-output verbosity.
    """

    output_format: str | None = None
    plugin_prefix: str | None = None
    marker_name: str | None = None
    output: str | None = None
    source_paths: list[Path] = field(default_factory=lambda: [])
    source_modules: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    config_files: list[Path] = field(default_factory=lambda: [])
    verbosity_level: int | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            output_format=CatalogFormat.from_option(self.output_format),
            plugin_prefix=self.plugin_prefix or None,
            marker_name=self.marker_name or DEFAULT_MARKER_NAME,
            output=self.output or STDOUT_PATH,
            source_paths=tuple(self.source_paths),
            source_modules=tuple(self.source_modules),
            exclude_patterns=tuple(self.exclude_patterns),
            config_files=tuple(self.config_files),
            verbosity_level=self.verbosity_level or 0,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None) -> MutableConfig:
        """Build a config layer from a parsed CmdCatalog TOML table.

        Unknown keys and values of the wrong type are logged and ignored.

        Args:
            data (TomlTable): The CmdCatalog table (top level of ``cmdcatalog.toml``
                or ``[tool.cmdcatalog]``).
            config_file (Path | None): File the table came from; relative paths
                are resolved against its directory. None for in-memory tables.

        Returns:
            MutableConfig: The layer.
        """
        base: Path = config_file.parent if config_file is not None else Path.cwd()
        draft = cls()

        def _str(table: TomlTable, key: str) -> str | None:
            value: Any = table.get(key)
            if value is None:
                return None
            if not isinstance(value, str):
                logger.warning("Ignoring non-string value for %r in %s", key, config_file)
                return None
            return value

        def _str_list(table: TomlTable, key: str) -> list[str]:
            value: Any = table.get(key, [])
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                logger.warning("Ignoring non-list value for %r in %s", key, config_file)
                return []
            return list(value)

        known: set[str] = {
            Toml.KEY_FORMAT,
            Toml.KEY_PLUGIN_PREFIX,
            Toml.KEY_MARKER,
            Toml.KEY_OUTPUT,
            Toml.SECTION_SOURCES,
        }
        for key in data:
            if key not in known:
                logger.warning("Unknown config key %r in %s", key, config_file)

        draft.output_format = _str(data, Toml.KEY_FORMAT)
        draft.plugin_prefix = _str(data, Toml.KEY_PLUGIN_PREFIX)
        draft.marker_name = _str(data, Toml.KEY_MARKER)
        output: str | None = _str(data, Toml.KEY_OUTPUT)
        if output is not None and output != STDOUT_PATH and config_file is not None:
            output = str(base / output)
        draft.output = output

        sources: Any = data.get(Toml.SECTION_SOURCES, {})
        if not isinstance(sources, dict):
            logger.warning("Ignoring malformed [%s] table in %s", Toml.SECTION_SOURCES, config_file)
            sources = {}
        draft.source_paths = [
            base / p if config_file is not None else Path(p)
            for p in _str_list(sources, Toml.KEY_PATHS)
        ]
        draft.source_modules = _str_list(sources, Toml.KEY_MODULES)
        draft.exclude_patterns = _str_list(sources, Toml.KEY_EXCLUDE)
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a config layer from ``cmdcatalog.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The layer, or None when a ``pyproject.toml``
                has no ``[tool.cmdcatalog]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_config_table(path, load_toml_dict(path))
        if table is None:
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        config_path: Path | None = None,
        no_config: bool = False,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Merge defaults with the explicit or discovered config file.

        Args:
            config_path (Path | None): Explicit config file; skips discovery.
            no_config (bool): Ignore config files entirely (defaults only).
            cwd (Path | None): Directory used for discovery (defaults to CWD).

        Returns:
            MutableConfig: The merged builder, ready for CLI overrides.
        """
        merged: MutableConfig = cls.from_defaults()
        if no_config:
            return merged
        path: Path | None = config_path or discover_config_file(cwd or Path.cwd())
        if path is None:
            logger.debug("No config file found")
            return merged
        layer: MutableConfig | None = cls.from_toml_file(path)
        if layer is not None:
            merged = merged.merge_with(layer)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder with ``other`` layered on top of ``self``.

        Scalars set in ``other`` win. Source paths and modules are replaced when
        ``other`` declares any; exclude patterns accumulate.
        """
        return MutableConfig(
            output_format=other.output_format
            if other.output_format is not None
            else self.output_format,
            plugin_prefix=other.plugin_prefix
            if other.plugin_prefix is not None
            else self.plugin_prefix,
            marker_name=other.marker_name if other.marker_name is not None else self.marker_name,
            output=other.output if other.output is not None else self.output,
            source_paths=list(other.source_paths or self.source_paths),
            source_modules=list(other.source_modules or self.source_modules),
            exclude_patterns=[*self.exclude_patterns, *other.exclude_patterns],
            config_files=[*self.config_files, *other.config_files],
            verbosity_level=other.verbosity_level
            if other.verbosity_level is not None
            else self.verbosity_level,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Layer CLI (or API) arguments on top of this builder.

        Recognized keys: ``output_format``, ``plugin_prefix``, ``marker_name``,
        ``output``, ``paths``, ``modules``, ``exclude_patterns`` and
        ``verbosity_level``. Missing or None values leave the layer unset.
        """
        layer = MutableConfig(
            output_format=args.get("output_format"),
            plugin_prefix=args.get("plugin_prefix"),
            marker_name=args.get("marker_name"),
            output=args.get("output"),
            source_paths=[Path(p) for p in args.get("paths") or ()],
            source_modules=list(args.get("modules") or ()),
            exclude_patterns=list(args.get("exclude_patterns") or ()),
            verbosity_level=args.get("verbosity_level"),
        )
        return self.merge_with(layer)
