# topmark:header:start
#
#   project      : CmdCatalog
#   file         : html.py
#   file_relpath : src/cmdcatalog/rendering/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML catalog printer.

The index is a definition list with one term per group; each command links to
its description (``#<name>``) and each description heading links back to the
index entry (``#pkg_<name>``).

Warning:
    Names, options and documentation text are emitted verbatim. Documentation is
    treated as trusted, author-controlled markup, so characters such as ``<`` or
    ``&`` are not escaped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdcatalog.rendering.base import CatalogPrinter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cmdcatalog.model import CommandMetadata


class HtmlCatalogPrinter(CatalogPrinter):
    """Render the catalog as an HTML fragment."""

    def begin_index(self) -> None:
        """Open the definition list."""
        self.println("<dl>")

    def end_index(self) -> None:
        """Close the definition list."""
        self.println("</dl>")

    def render_package_group(self, key: str, entries: Sequence[CommandMetadata]) -> None:
        """Print a term for ``key`` and a list of links to its commands."""
        self.println(f"<dt>{key}</dt>")
        self.println("<dd><ul>")
        for entry in entries:
            name: str = entry.name
            self.println(f"<li id='pkg_{name}'><a href='#{name}'>{name}</a>")
        self.println("</ul></dd>")

    def render_entry_description(self, entry: CommandMetadata) -> None:
        """Print the anchored heading, description, options and origin."""
        name: str = entry.name
        self.println(f"<h3 id='{name}'><a href='#pkg_{name}'>{name}</a></h3>")
        self.println(f"<p>{entry.description}</p>")
        self.println("<ul>")
        for opt in entry.options:
            self.println(f"<li>{opt}")
        self.println("</ul>")
        self.println("<ul>")
        self.println(f"<li>{entry.qualified_name}")
        self.println(f"<li>{entry.source_file}")
        self.println("</ul>")
