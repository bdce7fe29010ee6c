# topmark:header:start
#
#   project      : CmdCatalog
#   file         : pipeline.py
#   file_relpath : src/cmdcatalog/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Catalog pipeline: extract, classify, sort and render.

The driver is a fixed sequence over one snapshot of declarations:

1. keep the tagged declarations ([`extract_commands`][cmdcatalog.extractor.extract_commands]);
2. group them by plugin ([`classify`][cmdcatalog.classifier.classify]);
3. render the package index, one block per group in key order;
4. sort the full entry list once ([`sort_commands`][cmdcatalog.sorter.sort_commands]);
5. render one description per entry.

Failures raised by the declaration source propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cmdcatalog.classifier import classify, group_key_pattern
from cmdcatalog.config.logging import get_logger
from cmdcatalog.extractor import extract_commands
from cmdcatalog.rendering import get_printer
from cmdcatalog.sorter import sort_commands

if TYPE_CHECKING:
    import re
    from collections.abc import Iterable, Mapping
    from typing import TextIO

    from cmdcatalog.config.logging import CatalogLogger
    from cmdcatalog.config.model import Config
    from cmdcatalog.model import CommandMetadata, Declaration
    from cmdcatalog.rendering.base import CatalogPrinter
    from cmdcatalog.sources import DeclarationSource

logger: CatalogLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Catalog:
    """Both views of the catalog entries.

    Attributes:
        groups (Mapping[str, tuple[CommandMetadata, ...]]): Sorted groups in key order.
        entries (tuple[CommandMetadata, ...]): All entries, globally sorted.
    """

    groups: Mapping[str, tuple[CommandMetadata, ...]]
    entries: tuple[CommandMetadata, ...]

    @property
    def is_empty(self) -> bool:
        """True when no tagged declaration was found."""
        return not self.entries


def build_catalog(
    declarations: Iterable[Declaration],
    *,
    pattern: re.Pattern[str] | None = None,
) -> Catalog:
    """Extract and classify ``declarations`` into a [`Catalog`][cmdcatalog.pipeline.Catalog].

    Args:
        declarations (Iterable[Declaration]): Declaration snapshot.
        pattern (re.Pattern[str] | None): Grouping key pattern; see
            [`group_key_pattern`][cmdcatalog.classifier.group_key_pattern].

    Returns:
        Catalog: The grouped and globally sorted views.
    """
    entries: list[CommandMetadata] = extract_commands(declarations)
    groups: dict[str, tuple[CommandMetadata, ...]] = classify(entries, pattern)
    return Catalog(groups=groups, entries=tuple(sort_commands(entries)))


def render_catalog(catalog: Catalog, printer: CatalogPrinter) -> None:
    """Render both catalog sections through ``printer``."""
    printer.begin_index()
    for key, group in catalog.groups.items():
        logger.trace("Rendering index group %r (%d command(s))", key, len(group))
        printer.render_package_group(key, group)
    printer.end_index()

    printer.begin_descriptions()
    for entry in catalog.entries:
        printer.render_entry_description(entry)
    printer.end_descriptions()


def generate_catalog(
    source: DeclarationSource,
    out: TextIO,
    *,
    config: Config,
) -> Catalog:
    """Run the whole pipeline for ``source`` and write the catalog to ``out``.

    Args:
        source (DeclarationSource): Provider of the declaration snapshot.
        out (TextIO): Caller-owned output stream.
        config (Config): Runtime configuration (format and plugin prefix).

    Returns:
        Catalog: The rendered catalog, for reporting.
    """
    catalog: Catalog = build_catalog(
        source.iter_declarations(),
        pattern=group_key_pattern(config.plugin_prefix),
    )
    printer: CatalogPrinter = get_printer(config.output_format, out)
    logger.info(
        "Rendering %d command(s) in %d group(s) as %s",
        len(catalog.entries),
        len(catalog.groups),
        config.output_format.value,
    )
    render_catalog(catalog, printer)
    return catalog
