# topmark:header:start
#
#   project      : CmdCatalog
#   file         : constants.py
#   file_relpath : src/cmdcatalog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdCatalog Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

CMDCATALOG_VERSION: str = get_version("cmdcatalog")

# Config file names looked up in the working directory
CMDCATALOG_TOML_NAME: Final[str] = "cmdcatalog.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "cmdcatalog"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: Final[str] = "CMDCATALOG_LOG_LEVEL"

# Runtime attribute set on classes by the `command` decorator
MARKER_ATTRIBUTE: Final[str] = "__catalog_command__"
DEFAULT_MARKER_NAME: Final[str] = "command"

# Package segment that introduces the plugin name ("<prefix>.plugin.<name>")
PLUGIN_SEGMENT: Final[str] = "plugin"

# First character of a documentation tag line ("@since", "@author", ...)
DOC_TAG_PREFIX: Final[str] = "@"

STDOUT_PATH: Final[str] = "-"
