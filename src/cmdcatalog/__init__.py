# topmark:header:start
#
#   project      : CmdCatalog
#   file         : __init__.py
#   file_relpath : src/cmdcatalog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdCatalog package.

CmdCatalog is a build-time documentation generator for plugin-style code bases.
It collects classes tagged with the [`command`][cmdcatalog.marker.command]
decorator, groups them by plugin, and renders a catalog as plain text or HTML.
"""

from __future__ import annotations

from cmdcatalog.marker import command

__all__: list[str] = ["command"]
