# topmark:header:start
#
#   project      : CmdCatalog
#   file         : test_sorter.py
#   file_relpath : tests/unit/test_sorter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for entry ordering by package name, then command name."""

from __future__ import annotations

from cmdcatalog.model import CommandMetadata
from cmdcatalog.sorter import sort_commands
from tests.conftest import make_entry


def test_sort_by_package_then_name() -> None:
    """Package name is the primary key, command name the secondary key."""
    entries: list[CommandMetadata] = [
        make_entry("b", "pkg.two"),
        make_entry("a", "pkg.two"),
        make_entry("z", "pkg.one"),
    ]

    assert [(e.package_name, e.name) for e in sort_commands(entries)] == [
        ("pkg.one", "z"),
        ("pkg.two", "a"),
        ("pkg.two", "b"),
    ]


def test_sort_is_ordinal() -> None:
    """Upper case sorts before lower case (code point order)."""
    entries: list[CommandMetadata] = [make_entry("alpha", "p"), make_entry("Beta", "p")]

    assert [e.name for e in sort_commands(entries)] == ["Beta", "alpha"]


def test_sort_returns_new_list() -> None:
    """The input sequence is left untouched."""
    entries: list[CommandMetadata] = [make_entry("b", "p"), make_entry("a", "p")]

    result: list[CommandMetadata] = sort_commands(entries)

    assert result is not entries
    assert [e.name for e in entries] == ["b", "a"]
