# topmark:header:start
#
#   project      : CmdCatalog
#   file         : keys.py
#   file_relpath : src/cmdcatalog/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for CmdCatalog configuration.

These constants are the external configuration schema as it appears in
``cmdcatalog.toml`` and in ``[tool.cmdcatalog]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by CmdCatalog configuration."""

    # Top-level keys
    KEY_FORMAT: Final[str] = "format"
    KEY_PLUGIN_PREFIX: Final[str] = "plugin_prefix"
    KEY_MARKER: Final[str] = "marker"
    KEY_OUTPUT: Final[str] = "output"

    # [sources]
    SECTION_SOURCES: Final[str] = "sources"

    KEY_PATHS: Final[str] = "paths"
    KEY_MODULES: Final[str] = "modules"
    KEY_EXCLUDE: Final[str] = "exclude"
