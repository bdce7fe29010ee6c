# topmark:header:start
#
#   project      : CmdCatalog
#   file         : version.py
#   file_relpath : src/cmdcatalog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdCatalog `version` command: report the installed distribution version."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cmdcatalog.cli.cli_types import EnumChoiceParam, ReportFormat
from cmdcatalog.cli.cmd_common import get_effective_verbosity
from cmdcatalog.constants import CMDCATALOG_VERSION

if TYPE_CHECKING:
    from cmdcatalog.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the installed CmdCatalog version.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(ReportFormat),
    default=None,
    help=f"Report layout ({', '.join(v.value for v in ReportFormat)}; default: text).",
)
def version_command(
    *,
    output_format: ReportFormat | None = None,
) -> None:
    """Print the installed version.

    Args:
        output_format (ReportFormat | None): Report layout; text when omitted.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format == ReportFormat.MARKDOWN:
        console.print("# CmdCatalog Version\n")
        console.print(f"**CmdCatalog version: {CMDCATALOG_VERSION}**")
        return

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("CmdCatalog version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(CMDCATALOG_VERSION, bold=True)}")
    else:
        console.print(console.styled(CMDCATALOG_VERSION, bold=True))
