# topmark:header:start
#
#   project      : CmdCatalog
#   file         : text.py
#   file_relpath : src/cmdcatalog/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain text catalog printer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdcatalog.rendering.base import CatalogPrinter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cmdcatalog.model import CommandMetadata

ENTRY_SEPARATOR: str = "=" * 16
HEADER_SEPARATOR: str = "-" * 16


class TextCatalogPrinter(CatalogPrinter):
    """Render the catalog as plain text.

    Neither section has a wrapper. An index block is the group key followed by
    one indented command name per line::

        net
         get
         ping

    A description block is::

        ================
        ping
          force
          verbose
        ----------------
        Sends a ping.
        org.example.plugin.net.impl.PingCommand
        src/org/example/plugin/net/impl.py
        <blank line>
    """

    def render_package_group(self, key: str, entries: Sequence[CommandMetadata]) -> None:
        """Print the key and one indented name per entry."""
        self.println(key)
        for entry in entries:
            self.println(f" {entry.name}")

    def render_entry_description(self, entry: CommandMetadata) -> None:
        """Print the separator-framed header, the description and the origin."""
        self.println(ENTRY_SEPARATOR)
        self.println(entry.name)
        for opt in entry.options:
            self.println(f"  {opt}")
        self.println(HEADER_SEPARATOR)
        # Description is empty or already newline-terminated
        self.write(entry.description)
        self.println(entry.qualified_name)
        self.println(entry.source_file)
        self.println()
