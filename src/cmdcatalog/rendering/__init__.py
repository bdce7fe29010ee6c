# topmark:header:start
#
#   project      : CmdCatalog
#   file         : __init__.py
#   file_relpath : src/cmdcatalog/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Catalog printers.

Use [`get_printer`][cmdcatalog.rendering.get_printer] to pick the printer for a
[`CatalogFormat`][cmdcatalog.rendering.formats.CatalogFormat] once per run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdcatalog.rendering.base import CatalogPrinter
from cmdcatalog.rendering.formats import CatalogFormat
from cmdcatalog.rendering.html import HtmlCatalogPrinter
from cmdcatalog.rendering.text import TextCatalogPrinter

if TYPE_CHECKING:
    from typing import TextIO

_PRINTERS: dict[CatalogFormat, type[CatalogPrinter]] = {
    CatalogFormat.TEXT: TextCatalogPrinter,
    CatalogFormat.HTML: HtmlCatalogPrinter,
}


def get_printer(fmt: CatalogFormat | str | None, out: TextIO) -> CatalogPrinter:
    """Return the printer for ``fmt`` writing to ``out``.

    Args:
        fmt (CatalogFormat | str | None): Format or raw selection value; raw
            values go through [`CatalogFormat.from_option`][cmdcatalog.rendering.formats.CatalogFormat.from_option].
        out (TextIO): Caller-owned output stream.

    Returns:
        CatalogPrinter: The selected printer.
    """
    resolved: CatalogFormat = (
        fmt if isinstance(fmt, CatalogFormat) else CatalogFormat.from_option(fmt)
    )
    return _PRINTERS[resolved](out)


__all__: list[str] = [
    "CatalogFormat",
    "CatalogPrinter",
    "HtmlCatalogPrinter",
    "TextCatalogPrinter",
    "get_printer",
]
