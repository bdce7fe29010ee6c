# topmark:header:start
#
#   project      : CmdCatalog
#   file         : formats.py
#   file_relpath : src/cmdcatalog/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines the catalog output formats.

Format selection is deliberately lenient: the value ``"html"`` selects the HTML
printer; any other value, including no value at all, selects plain text.
"""

from __future__ import annotations

from enum import Enum


class CatalogFormat(str, Enum):
    """Output format for the rendered catalog.

    Attributes:
        TEXT: Plain text with separator lines.
        HTML: An HTML fragment (definition-list index, anchored descriptions).
    """

    TEXT = "text"
    HTML = "html"

    @classmethod
    def from_option(cls, value: str | None) -> CatalogFormat:
        """Resolve a raw selection value into a format.

        Args:
            value (str | None): Raw value from the CLI or configuration.

        Returns:
            CatalogFormat: `HTML` for exactly ``"html"``, `TEXT` otherwise.
        """
        return cls.HTML if value == cls.HTML.value else cls.TEXT
