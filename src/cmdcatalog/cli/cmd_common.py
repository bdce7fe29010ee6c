# topmark:header:start
#
#   project      : CmdCatalog
#   file         : cmd_common.py
#   file_relpath : src/cmdcatalog/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by CLI commands. They
intentionally avoid policy (messages, exit codes) and only encapsulate
plumbing such as reading shared context state and assembling sources.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cmdcatalog.config.logging import get_logger
from cmdcatalog.sources import ChainedDeclarationSource
from cmdcatalog.sources.modules import ModuleDeclarationSource
from cmdcatalog.sources.scanner import PythonSourceScanner

if TYPE_CHECKING:
    from cmdcatalog.config import Config
    from cmdcatalog.sources import DeclarationSource

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context, config: Config | None = None) -> int:
    """Return the effective program-output verbosity for this command.

    Resolution order:
        1. Config.verbosity_level if non-zero
        2. ctx.obj["verbosity_level"] if present
        3. 0 (terse)
    """
    if config is not None and config.verbosity_level:
        return config.verbosity_level
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def build_declaration_source(config: Config) -> DeclarationSource | None:
    """Assemble the declaration source described by ``config``.

    Static scan roots are read before imported modules.

    Returns:
        DeclarationSource | None: The source, or None when ``config`` names no
            paths and no modules.
    """
    sources: list[DeclarationSource] = []
    if config.source_paths:
        sources.append(
            PythonSourceScanner(
                config.source_paths,
                marker_name=config.marker_name,
                exclude_patterns=config.exclude_patterns,
            )
        )
    if config.source_modules:
        sources.append(ModuleDeclarationSource(config.source_modules))
    if not sources:
        return None
    logger.debug(
        "Declaration sources: %d path(s), %d module(s)",
        len(config.source_paths),
        len(config.source_modules),
    )
    return ChainedDeclarationSource(sources)
