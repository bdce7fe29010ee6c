# topmark:header:start
#
#   project      : CmdCatalog
#   file         : __init__.py
#   file_relpath : src/cmdcatalog/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the CmdCatalog CLI."""
