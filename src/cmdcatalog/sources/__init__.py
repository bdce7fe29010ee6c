# topmark:header:start
#
#   project      : CmdCatalog
#   file         : __init__.py
#   file_relpath : src/cmdcatalog/sources/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Declaration sources.

The catalog core depends only on the [`DeclarationSource`][cmdcatalog.sources.DeclarationSource]
protocol. This package provides:

- [`StaticDeclarationSource`][cmdcatalog.sources.StaticDeclarationSource]: an in-memory snapshot;
- [`ChainedDeclarationSource`][cmdcatalog.sources.ChainedDeclarationSource]: several sources
  read one after the other;
- [`PythonSourceScanner`][cmdcatalog.sources.scanner.PythonSourceScanner]: static scan of
  ``.py`` files;
- [`ModuleDeclarationSource`][cmdcatalog.sources.modules.ModuleDeclarationSource]: runtime
  inspection of importable modules.

Sources raise [`DeclarationSourceError`][cmdcatalog.errors.DeclarationSourceError]
subclasses when they cannot enumerate their declarations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from cmdcatalog.model import Declaration


class DeclarationSource(Protocol):
    """Anything that can enumerate declarations for one catalog run."""

    def iter_declarations(self) -> Iterator[Declaration]:
        """Yield every declaration, tagged or not."""
        ...


class StaticDeclarationSource:
    """Declaration source over a fixed, in-memory snapshot."""

    def __init__(self, declarations: Iterable[Declaration]) -> None:
        self.declarations: tuple[Declaration, ...] = tuple(declarations)

    def iter_declarations(self) -> Iterator[Declaration]:
        """Yield the snapshot in the order it was given."""
        yield from self.declarations


class ChainedDeclarationSource:
    """Declaration source that reads several sources in order."""

    def __init__(self, sources: Iterable[DeclarationSource]) -> None:
        self.sources: tuple[DeclarationSource, ...] = tuple(sources)

    def iter_declarations(self) -> Iterator[Declaration]:
        """Yield the declarations of each source in turn."""
        for source in self.sources:
            yield from source.iter_declarations()


__all__: list[str] = [
    "ChainedDeclarationSource",
    "DeclarationSource",
    "StaticDeclarationSource",
]
