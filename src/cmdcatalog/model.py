# topmark:header:start
#
#   project      : CmdCatalog
#   file         : model.py
#   file_relpath : src/cmdcatalog/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data shapes shared by declaration sources, the core pipeline and the printers.

- [`Declaration`][cmdcatalog.model.Declaration]: what a declaration source yields,
  tagged or not.
- [`CommandMetadata`][cmdcatalog.model.CommandMetadata]: one catalog entry, built
  from a tagged declaration.

All shapes are immutable; they are built once per run and discarded at exit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cmdcatalog.text import parse_command_options, trim_doc

if TYPE_CHECKING:
    from cmdcatalog.marker import CommandMarker


@dataclass(frozen=True, slots=True)
class Declaration:
    """A class exposed by a declaration source.

    Attributes:
        qualified_name (str): Fully qualified class name (``pkg.module.Class``).
        package_name (str): Fully qualified name of the declaring package.
        source_file (str): Path of the originating source file.
        doc (str): Raw documentation text (may be empty).
        marker (CommandMarker | None): The catalog marker, or ``None`` when the
            class is not tagged.
    """

    qualified_name: str
    package_name: str
    source_file: str
    doc: str = ""
    marker: CommandMarker | None = None


@dataclass(frozen=True, slots=True)
class CommandMetadata:
    """Catalog entry derived from a tagged declaration.

    Attributes:
        name (str): Catalog entry identifier; not guaranteed unique.
        options (tuple[str, ...]): Option tokens parsed from the marker string.
        qualified_name (str): Fully qualified class name.
        package_name (str): Fully qualified package name.
        source_file (str): Path of the originating source file.
        raw_doc (str): Documentation text, unprocessed.
    """

    name: str
    options: tuple[str, ...]
    qualified_name: str
    package_name: str
    source_file: str
    raw_doc: str = ""

    @classmethod
    def from_declaration(cls, decl: Declaration) -> CommandMetadata:
        """Build an entry from a tagged declaration.

        Raises:
            ValueError: If ``decl`` carries no marker.
        """
        if decl.marker is None:
            raise ValueError(f"Declaration {decl.qualified_name} carries no command marker")
        return cls(
            name=decl.marker.name,
            options=parse_command_options(decl.marker.options),
            qualified_name=decl.qualified_name,
            package_name=decl.package_name,
            source_file=decl.source_file,
            raw_doc=decl.doc,
        )

    @property
    def description(self) -> str:
        """Normalized documentation text (see [`trim_doc`][cmdcatalog.text.trim_doc])."""
        return trim_doc(self.raw_doc)
