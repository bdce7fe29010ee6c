# topmark:header:start
#
#   project      : CmdCatalog
#   file         : test_classifier.py
#   file_relpath : tests/unit/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for grouping-key derivation and plugin classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdcatalog.classifier import classify, derive_group_key, group_key_pattern
from tests.conftest import make_entry, parametrize

if TYPE_CHECKING:
    import re

    from cmdcatalog.model import CommandMetadata


@parametrize(
    ("package_name", "expected"),
    [
        ("org.example.plugin.net", "net"),
        ("org.example.plugin.net.impl.deep", "net"),
        ("com.acme.plugin.core", "core"),
        ("x.plugin.y", "y"),
        ("org.example.util", "org.example.util"),
        ("plugin.net", "plugin.net"),
        ("org.example.plugin", "org.example.plugin"),
        ("org.example.plugins.net", "org.example.plugins.net"),
        ("", ""),
    ],
)
def test_derive_group_key_any_prefix(package_name: str, expected: str) -> None:
    """The segment after '.plugin.' is the key; anything else keys on itself."""
    assert derive_group_key(package_name) == expected


def test_derive_group_key_first_plugin_segment_wins() -> None:
    """With nested 'plugin' segments the leftmost one is used."""
    assert derive_group_key("a.plugin.b.plugin.c") == "b"


@parametrize(
    ("package_name", "expected"),
    [
        ("org.example.plugin.net", "net"),
        ("org.example.plugin.net.impl", "net"),
        ("com.acme.plugin.core", "com.acme.plugin.core"),
        ("org.exampleX.plugin.net", "org.exampleX.plugin.net"),
        ("orgXexample.plugin.net", "orgXexample.plugin.net"),
    ],
)
def test_derive_group_key_with_fixed_prefix(package_name: str, expected: str) -> None:
    """A configured prefix must match literally (dots are not wildcards)."""
    pattern: re.Pattern[str] = group_key_pattern("org.example")
    assert derive_group_key(package_name, pattern) == expected


def test_empty_prefix_means_any_prefix() -> None:
    """An empty prefix behaves like no prefix at all."""
    assert group_key_pattern("").pattern == group_key_pattern(None).pattern


def test_classify_groups_every_entry_once() -> None:
    """Each entry lands in exactly one group, the one named by its key."""
    entries: list[CommandMetadata] = [
        make_entry("ping", "org.example.plugin.net"),
        make_entry("get", "org.example.plugin.net.http"),
        make_entry("build", "org.example.plugin.core"),
        make_entry("misc", "org.example.util"),
    ]

    groups = classify(entries)

    assert sum(len(g) for g in groups.values()) == len(entries)
    assert {k: [e.name for e in g] for k, g in groups.items()} == {
        "core": ["build"],
        "net": ["ping", "get"],
        "org.example.util": ["misc"],
    }


def test_classify_keys_iterate_in_ascending_order() -> None:
    """Group order does not depend on input order."""
    entries: list[CommandMetadata] = [
        make_entry("z", "org.example.plugin.zeta"),
        make_entry("a", "org.example.plugin.alpha"),
        make_entry("m", "Mixed.Case"),
    ]

    assert list(classify(entries)) == ["Mixed.Case", "alpha", "zeta"]
    assert list(classify(reversed(entries))) == ["Mixed.Case", "alpha", "zeta"]


def test_classify_sorts_within_group() -> None:
    """Members of a group are sorted by package, then name."""
    entries: list[CommandMetadata] = [
        make_entry("ping", "org.example.plugin.net"),
        make_entry("get", "org.example.plugin.net"),
        make_entry("aaa", "org.example.plugin.net.z"),
    ]

    (group,) = classify(entries).values()

    assert [e.name for e in group] == ["get", "ping", "aaa"]


def test_classify_empty() -> None:
    """No entries give no groups."""
    assert classify([]) == {}
