# topmark:header:start
#
#   project      : CmdCatalog
#   file         : sorter.py
#   file_relpath : src/cmdcatalog/sorter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Total ordering of catalog entries: package name first, then command name.

Both keys compare ordinally (code point by code point). Entries with the same
package and name keep their input order since `sorted` is stable; duplicates are
neither detected nor rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmdcatalog.model import CommandMetadata


def command_sort_key(entry: CommandMetadata) -> tuple[str, str]:
    """Return the ``(package_name, name)`` sort key of ``entry``."""
    return (entry.package_name, entry.name)


def sort_commands(entries: Iterable[CommandMetadata]) -> list[CommandMetadata]:
    """Return ``entries`` as a new list sorted by [`command_sort_key`][cmdcatalog.sorter.command_sort_key]."""
    return sorted(entries, key=command_sort_key)
