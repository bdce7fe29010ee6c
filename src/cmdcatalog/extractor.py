# topmark:header:start
#
#   project      : CmdCatalog
#   file         : extractor.py
#   file_relpath : src/cmdcatalog/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filter declarations down to catalog entries.

Untagged declarations are the normal case for most classes in a scan, so they
are dropped silently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdcatalog.config.logging import get_logger
from cmdcatalog.model import CommandMetadata

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmdcatalog.config.logging import CatalogLogger
    from cmdcatalog.model import Declaration

logger: CatalogLogger = get_logger(__name__)


def extract_commands(declarations: Iterable[Declaration]) -> list[CommandMetadata]:
    """Return one entry per tagged declaration, in source order.

    Args:
        declarations (Iterable[Declaration]): Declarations in whatever order the
            source yields them.

    Returns:
        list[CommandMetadata]: Entries for the declarations carrying a marker.
    """
    entries: list[CommandMetadata] = []
    for decl in declarations:
        if decl.marker is not None:
            entries.append(CommandMetadata.from_declaration(decl))
    logger.debug("Extracted %d command(s)", len(entries))
    return entries
