# topmark:header:start
#
#   project      : CmdCatalog
#   file         : main.py
#   file_relpath : src/cmdcatalog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `cmdcatalog` command group.

The group resolves verbosity and color once, configures internal logging from
the environment, and leaves a console in ``ctx.obj`` for its subcommands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cmdcatalog.cli.commands.generate import generate_command
from cmdcatalog.cli.commands.version import version_command
from cmdcatalog.cli.console import ClickConsole
from cmdcatalog.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from cmdcatalog.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from cmdcatalog.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Store the verbosity level and the console in ``ctx.obj``.

    Args:
        ctx (click.Context): Group context; ``obj`` and ``color`` are set here.
        verbose (int): Occurrences of ``-v``.
        quiet (int): Occurrences of ``-q``.
        color_mode (ColorMode | None): Value of ``--color``, if given.
        no_color (bool): ``--no-color`` flag; overrides ``--color``.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by CMDCATALOG_LOG_LEVEL only
    setup_logging(level=resolve_env_log_level())

    mode: ColorMode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=mode)
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render a catalog of the tagged command classes in a code base.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Run the group callback, or print usage when no subcommand is given."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'cmdcatalog generate [PATHS...]' to render a catalog.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(generate_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
