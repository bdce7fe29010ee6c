# topmark:header:start
#
#   project      : CmdCatalog
#   file         : errors.py
#   file_relpath : src/cmdcatalog/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised by the CmdCatalog core.

These exceptions are Click-free. The CLI maps them onto exit codes in
[`cmdcatalog.cli.errors`][cmdcatalog.cli.errors].
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """Base class for all CmdCatalog errors."""


class DeclarationSourceError(CatalogError):
    """A declaration source failed to enumerate its declarations.

    Attributes:
        path (Path | None): The file or directory involved, when known.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class SourceNotFoundError(DeclarationSourceError):
    """A configured source root does not exist."""


class SourceParseError(DeclarationSourceError):
    """A source file could not be decoded or parsed, or its marker could not be read."""


class SourceImportError(DeclarationSourceError):
    """A module named as a declaration source could not be imported."""
