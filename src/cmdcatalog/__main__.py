# topmark:header:start
#
#   project      : CmdCatalog
#   file         : __main__.py
#   file_relpath : src/cmdcatalog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CmdCatalog via ``python -m cmdcatalog``.

It delegates directly to [`cmdcatalog.cli.main.cli`][], so the console script and
the module interface share a single entry point.

Examples:
    Render an HTML catalog for a source tree::

        python -m cmdcatalog generate --format html src
"""

from __future__ import annotations

from cmdcatalog.cli.main import cli

if __name__ == "__main__":
    cli()
