# topmark:header:start
#
#   project      : CmdCatalog
#   file         : loaders.py
#   file_relpath : src/cmdcatalog/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading CmdCatalog configuration from
on-disk TOML files (``cmdcatalog.toml`` / ``pyproject.toml``) and for locating
them. Parsing is done with ``tomlkit`` and returned as plain ``dict`` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cmdcatalog.config.keys import Toml
from cmdcatalog.config.logging import get_logger
from cmdcatalog.constants import (
    CMDCATALOG_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from cmdcatalog.config.logging import CatalogLogger

TomlTable = dict[str, Any]

logger: CatalogLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return CmdCatalog's runtime defaults as a new dict (no I/O)."""
    return {
        Toml.KEY_FORMAT: "text",
        Toml.KEY_PLUGIN_PREFIX: "",
        Toml.KEY_MARKER: "command",
        Toml.KEY_OUTPUT: "-",
        Toml.SECTION_SOURCES: {
            Toml.KEY_PATHS: [],
            Toml.KEY_MODULES: [],
            Toml.KEY_EXCLUDE: [],
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_config_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the CmdCatalog table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.cmdcatalog]``; for any other file it
    is the whole document.

    Returns:
        TomlTable | None: The table, or None when a ``pyproject.toml`` has no
            ``[tool.cmdcatalog]`` section.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    return cast("TomlTable", section)


def discover_config_file(start: Path) -> Path | None:
    """Return the config file to use for a run started in ``start``.

    ``cmdcatalog.toml`` takes precedence over a ``pyproject.toml`` in the same
    directory; a ``pyproject.toml`` counts only if it has ``[tool.cmdcatalog]``.
    """
    candidate: Path = start / CMDCATALOG_TOML_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = start / PYPROJECT_TOML_NAME
    if pyproject.is_file() and extract_config_table(pyproject, load_toml_dict(pyproject)):
        return pyproject
    return None
