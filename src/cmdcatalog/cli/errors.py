# topmark:header:start
#
#   project      : CmdCatalog
#   file         : errors.py
#   file_relpath : src/cmdcatalog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for CmdCatalog CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Use [`from_source_error`][cmdcatalog.cli.errors.from_source_error]
    to translate core declaration-source errors.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from cmdcatalog.cli.exit_codes import ExitCode
from cmdcatalog.errors import (
    DeclarationSourceError,
    SourceImportError,
    SourceNotFoundError,
    SourceParseError,
)


class CatalogCliError(click.ClickException):
    """Base class for all CmdCatalog CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class CatalogUsageError(CatalogCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CatalogConfigError(CatalogCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class CatalogFileNotFoundError(CatalogCliError):
    """Error when a source root does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CatalogParseError(CatalogCliError):
    """Error when a source file cannot be decoded or parsed."""

    exit_code = ExitCode.PARSE_ERROR


class CatalogIOError(CatalogCliError):
    """Error for I/O errors reading sources or writing the catalog."""

    exit_code = ExitCode.IO_ERROR


class CatalogImportError(CatalogCliError):
    """Error when a module source cannot be imported."""

    exit_code = ExitCode.FAILURE


class CatalogUnexpectedError(CatalogCliError):
    """Error for failures no other CLI error covers (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def from_source_error(exc: DeclarationSourceError) -> CatalogCliError:
    """Map a core declaration-source error onto the matching CLI error."""
    if isinstance(exc, SourceNotFoundError):
        return CatalogFileNotFoundError(str(exc))
    if isinstance(exc, SourceParseError):
        return CatalogParseError(str(exc))
    if isinstance(exc, SourceImportError):
        return CatalogImportError(str(exc))
    return CatalogIOError(str(exc))
