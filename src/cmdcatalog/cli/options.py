# topmark:header:start
#
#   project      : CmdCatalog
#   file         : options.py
#   file_relpath : src/cmdcatalog/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Group-level options shared by all CmdCatalog commands.

Verbosity only shapes the status messages written to stderr; the catalog itself
is never affected. Color is decided once per invocation from ``--color`` and
``--no-color``, then ``FORCE_COLOR`` and ``NO_COLOR``, and finally whether stdout
is a terminal.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from cmdcatalog.cli.errors import CatalogUsageError

P = ParamSpec("P")
R = TypeVar("R")


class ColorMode(str, Enum):
    """Value of the ``--color`` option."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Fold the ``-v`` and ``-q`` counts into one signed level.

    Args:
        verbose_count (int): Occurrences of ``-v``.
        quiet_count (int): Occurrences of ``-q``.

    Returns:
        int: Positive when verbose, negative when quiet, 0 by default.

    Raises:
        CatalogUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise CatalogUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count or -quiet_count


def _stdout_is_terminal() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        # Replaced or closed stream
        return False


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Decide whether styled output is enabled.

    An explicit ``always`` or ``never`` wins. In ``auto`` mode a non-empty
    ``FORCE_COLOR`` other than ``"0"`` enables color, any ``NO_COLOR`` disables
    it, and otherwise color follows the terminal check.

    Args:
        cli_mode (ColorMode | None): Mode requested on the command line.
        stdout_isatty (bool | None): Terminal check result; detected when ``None``.

    Returns:
        bool: ``True`` to emit ANSI styling.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    if os.getenv("FORCE_COLOR") not in (None, "", "0"):
        return True
    if "NO_COLOR" in os.environ:
        return False
    return _stdout_is_terminal() if stdout_isatty is None else stdout_isatty


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Attach the counted ``-v/--verbose`` and ``-q/--quiet`` flags to ``f``."""
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Silence status messages on stderr.",
    )(f)
    return click.option(
        "-v",
        "--verbose",
        count=True,
        help="Report more on stderr; repeat for more detail.",
    )(f)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Attach ``--color MODE`` and its ``--no-color`` shorthand to ``f``."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Same as --color=never.",
    )(f)
    return click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Styled output: auto (default), always or never.",
    )(f)
