# topmark:header:start
#
#   project      : CmdCatalog
#   file         : classifier.py
#   file_relpath : src/cmdcatalog/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Group catalog entries by plugin.

The grouping key of an entry is derived from its package name: for packages
laid out as ``<prefix>.plugin.<segment>.…`` the key is ``<segment>``; any other
package name is used verbatim as its own key.

Groups are returned in ascending key order and each group is sorted with
[`command_sort_key`][cmdcatalog.sorter.command_sort_key], so the rendered index is
reproducible from run to run.
"""

from __future__ import annotations

import re
from collections import defaultdict
from typing import TYPE_CHECKING

from cmdcatalog.config.logging import get_logger
from cmdcatalog.constants import PLUGIN_SEGMENT
from cmdcatalog.sorter import sort_commands

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmdcatalog.config.logging import CatalogLogger
    from cmdcatalog.model import CommandMetadata

logger: CatalogLogger = get_logger(__name__)

# Any non-empty dotted prefix; the first ".plugin." segment wins.
_ANY_PREFIX: str = r"[^.]+(?:\.[^.]+)*?"


def group_key_pattern(plugin_prefix: str | None = None) -> re.Pattern[str]:
    """Compile the pattern that extracts the plugin segment from a package name.

    Args:
        plugin_prefix (str | None): Dotted prefix that precedes ``.plugin.``
            (e.g. ``"org.example"``). ``None`` or an empty string accepts any
            non-empty prefix.

    Returns:
        re.Pattern[str]: A pattern whose first group captures the plugin segment.
    """
    prefix: str = re.escape(plugin_prefix) if plugin_prefix else _ANY_PREFIX
    return re.compile(rf"^{prefix}\.{PLUGIN_SEGMENT}\.([^.]+)")


def derive_group_key(package_name: str, pattern: re.Pattern[str] | None = None) -> str:
    """Return the grouping key for ``package_name``.

    Args:
        package_name (str): Fully qualified package name.
        pattern (re.Pattern[str] | None): Pattern from
            [`group_key_pattern`][cmdcatalog.classifier.group_key_pattern];
            defaults to the any-prefix pattern.

    Returns:
        str: The plugin segment on a match, otherwise ``package_name`` itself.
    """
    m: re.Match[str] | None = (pattern or group_key_pattern()).match(package_name)
    return m.group(1) if m else package_name


def classify(
    entries: Iterable[CommandMetadata],
    pattern: re.Pattern[str] | None = None,
) -> dict[str, tuple[CommandMetadata, ...]]:
    """Group ``entries`` by grouping key.

    Every input entry lands in exactly one group.

    Args:
        entries (Iterable[CommandMetadata]): Extracted entries, in any order.
        pattern (re.Pattern[str] | None): Key pattern; see
            [`derive_group_key`][cmdcatalog.classifier.derive_group_key].

    Returns:
        dict[str, tuple[CommandMetadata, ...]]: Sorted groups keyed by grouping
            key, iterating in ascending key order.
    """
    pat: re.Pattern[str] = pattern or group_key_pattern()
    groups: defaultdict[str, list[CommandMetadata]] = defaultdict(list)
    for entry in entries:
        groups[derive_group_key(entry.package_name, pat)].append(entry)

    logger.debug("Classified commands into %d group(s)", len(groups))
    return {key: tuple(sort_commands(groups[key])) for key in sorted(groups)}
