# topmark:header:start
#
#   project      : CmdCatalog
#   file         : base.py
#   file_relpath : src/cmdcatalog/rendering/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printer contract shared by all catalog output formats.

A printer writes two sections to its output stream, always in this order:

1. the package index: `begin_index`, one `render_package_group` per group,
   `end_index`;
2. the descriptions: `begin_descriptions`, one `render_entry_description` per
   entry, `end_descriptions`.

The traversal itself lives in [`cmdcatalog.pipeline`][cmdcatalog.pipeline];
printers only decide what each step looks like.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cmdcatalog.model import CommandMetadata


class CatalogPrinter(ABC):
    """Base class for catalog printers.

    Args:
        out (TextIO): Caller-owned output stream; printers never close it.

    Attributes:
        out (TextIO): The output stream.
    """

    out: TextIO

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def println(self, text: str = "") -> None:
        """Write ``text`` followed by a newline."""
        self.out.write(text + "\n")

    def write(self, text: str) -> None:
        """Write ``text`` as-is."""
        self.out.write(text)

    def begin_index(self) -> None:  # noqa: B027 - optional hook
        """Open the package index section."""

    def end_index(self) -> None:  # noqa: B027 - optional hook
        """Close the package index section."""

    @abstractmethod
    def render_package_group(self, key: str, entries: Sequence[CommandMetadata]) -> None:
        """Render one package index block.

        Args:
            key (str): Grouping key.
            entries (Sequence[CommandMetadata]): Sorted entries of the group.
        """

    def begin_descriptions(self) -> None:  # noqa: B027 - optional hook
        """Open the description section."""

    def end_descriptions(self) -> None:  # noqa: B027 - optional hook
        """Close the description section."""

    @abstractmethod
    def render_entry_description(self, entry: CommandMetadata) -> None:
        """Render the full description block of one entry."""
