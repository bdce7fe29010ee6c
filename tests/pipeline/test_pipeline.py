# topmark:header:start
#
#   project      : CmdCatalog
#   file         : test_pipeline.py
#   file_relpath : tests/pipeline/test_pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline tests: extract, classify, sort and render over in-memory sources."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from cmdcatalog.pipeline import build_catalog, generate_catalog, render_catalog
from cmdcatalog.rendering.text import TextCatalogPrinter
from cmdcatalog.sources import ChainedDeclarationSource, StaticDeclarationSource
from tests.conftest import make_config, make_declaration, mark_pipeline, parametrize

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from cmdcatalog.model import CommandMetadata, Declaration
    from cmdcatalog.pipeline import Catalog

PKG = "org.example.plugin.net.impl"


@pytest.fixture
def ping_get() -> list[Declaration]:
    """The two-command catalog used by the end-to-end scenario."""
    return [
        make_declaration(
            f"{PKG}.PingCommand",
            package_name=PKG,
            name="ping",
            options="force,verbose",
            doc=" Sends a ping.\n@since 1.0",
            source_file="src/org/example/plugin/net/impl/__init__.py",
        ),
        make_declaration(f"{PKG}.Helper", package_name=PKG, tagged=False),
        make_declaration(
            f"{PKG}.GetCommand",
            package_name=PKG,
            name="get",
            doc=" Fetches a value.",
            source_file="src/org/example/plugin/net/impl/__init__.py",
        ),
    ]


@mark_pipeline
def test_ping_get_groups_under_net(ping_get: list[Declaration]) -> None:
    """Both commands land in one 'net' group, sorted get before ping."""
    catalog: Catalog = build_catalog(ping_get)

    assert list(catalog.groups) == ["net"]
    assert [e.name for e in catalog.groups["net"]] == ["get", "ping"]
    assert [e.name for e in catalog.entries] == ["get", "ping"]


@mark_pipeline
def test_ping_get_text_catalog(ping_get: list[Declaration]) -> None:
    """The full plain text catalog: index first, then descriptions."""
    buf = io.StringIO()

    generate_catalog(StaticDeclarationSource(ping_get), buf, config=make_config())

    assert buf.getvalue() == (
        "net\n"
        " get\n"
        " ping\n"
        "================\n"
        "get\n"
        "----------------\n"
        "Fetches a value.\n"
        f"{PKG}.GetCommand\n"
        "src/org/example/plugin/net/impl/__init__.py\n"
        "\n"
        "================\n"
        "ping\n"
        "  force\n"
        "  verbose\n"
        "----------------\n"
        "Sends a ping.\n"
        f"{PKG}.PingCommand\n"
        "src/org/example/plugin/net/impl/__init__.py\n"
        "\n"
    )


@mark_pipeline
@parametrize(
    ("output_format", "has_markers"),
    [("html", True), ("text", False), (None, False), ("HTML", False), ("xml", False)],
)
def test_format_selection_controls_html_markers(
    ping_get: list[Declaration],
    output_format: str | None,
    has_markers: bool,
) -> None:
    """Only 'html' produces the definition-list wrapper."""
    buf = io.StringIO()

    generate_catalog(
        StaticDeclarationSource(ping_get),
        buf,
        config=make_config(output_format=output_format),
    )

    out: str = buf.getvalue()
    assert ("<dl>" in out) is has_markers
    assert ("</dl>" in out) is has_markers


@mark_pipeline
def test_groups_are_rendered_in_key_order() -> None:
    """Index blocks follow ascending key order, not input order."""
    decls: list[Declaration] = [
        make_declaration("org.example.plugin.zeta.mod.Z", name="z"),
        make_declaration("org.example.plugin.alpha.mod.A", name="a"),
        make_declaration("other.pkg.M", name="m"),
    ]
    buf = io.StringIO()

    generate_catalog(StaticDeclarationSource(decls), buf, config=make_config())

    index: list[str] = buf.getvalue().split("================\n")[0].splitlines()
    assert index == ["alpha", " a", "other", " m", "zeta", " z"]


@mark_pipeline
def test_plugin_prefix_restricts_grouping() -> None:
    """With a configured prefix, other plugin-style packages key on themselves."""
    decls: list[Declaration] = [
        make_declaration("org.example.plugin.net.impl.P", name="p"),
        make_declaration("com.acme.plugin.net.impl.Q", name="q"),
    ]

    catalog: Catalog = generate_catalog(
        StaticDeclarationSource(decls),
        io.StringIO(),
        config=make_config(plugin_prefix="org.example"),
    )

    assert list(catalog.groups) == ["com.acme.plugin.net", "net"]


@mark_pipeline
def test_empty_source_renders_wrappers_only() -> None:
    """An empty catalog still opens and closes both HTML sections."""
    buf = io.StringIO()

    catalog: Catalog = generate_catalog(
        StaticDeclarationSource([]),
        buf,
        config=make_config(output_format="html"),
    )

    assert catalog.is_empty
    assert buf.getvalue() == "<dl>\n</dl>\n"


class _RecordingPrinter(TextCatalogPrinter):
    """Printer that records the traversal instead of checking output."""

    def __init__(self) -> None:
        super().__init__(io.StringIO())
        self.calls: list[str] = []

    def begin_index(self) -> None:
        self.calls.append("begin_index")

    def end_index(self) -> None:
        self.calls.append("end_index")

    def render_package_group(self, key: str, entries: Sequence[CommandMetadata]) -> None:
        self.calls.append(f"group:{key}")

    def begin_descriptions(self) -> None:
        self.calls.append("begin_descriptions")

    def end_descriptions(self) -> None:
        self.calls.append("end_descriptions")

    def render_entry_description(self, entry: CommandMetadata) -> None:
        self.calls.append(f"entry:{entry.name}")


@mark_pipeline
def test_render_traversal_order(ping_get: list[Declaration]) -> None:
    """The index section is fully rendered before the description section."""
    printer = _RecordingPrinter()

    render_catalog(build_catalog(ping_get), printer)

    assert printer.calls == [
        "begin_index",
        "group:net",
        "end_index",
        "begin_descriptions",
        "entry:get",
        "entry:ping",
        "end_descriptions",
    ]


@mark_pipeline
def test_chained_source_reads_sources_in_order() -> None:
    """A chained source yields the first source's declarations first."""
    first = StaticDeclarationSource([make_declaration("a.m.One", name="one")])
    second = StaticDeclarationSource([make_declaration("b.m.Two", name="two")])

    decls: Iterator[Declaration] = ChainedDeclarationSource([first, second]).iter_declarations()

    assert [d.qualified_name for d in decls] == ["a.m.One", "b.m.Two"]
