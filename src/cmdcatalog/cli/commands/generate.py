# topmark:header:start
#
#   project      : CmdCatalog
#   file         : generate.py
#   file_relpath : src/cmdcatalog/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdCatalog `generate` command.

Scans the given source roots (and/or imports the given modules), then writes
the command catalog, index first and descriptions second, to stdout or to the
``--output`` file.

The declaration snapshot is collected before the output is opened, so a source
error never leaves a truncated catalog file behind.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from cmdcatalog.cli.cmd_common import build_declaration_source, get_effective_verbosity
from cmdcatalog.cli.errors import (
    CatalogConfigError,
    CatalogIOError,
    CatalogUnexpectedError,
    CatalogUsageError,
    from_source_error,
)
from cmdcatalog.config import MutableConfig
from cmdcatalog.config.logging import get_logger
from cmdcatalog.errors import DeclarationSourceError
from cmdcatalog.pipeline import generate_catalog
from cmdcatalog.sources import StaticDeclarationSource

if TYPE_CHECKING:
    from cmdcatalog.cli.console_api import ConsoleLike
    from cmdcatalog.config import Config
    from cmdcatalog.pipeline import Catalog
    from cmdcatalog.sources import DeclarationSource

logger = get_logger(__name__)


@click.command(
    name="generate",
    help="Render the command catalog for the given source roots.",
    epilog="""
PATHS are directories holding top-level packages (e.g. 'src') or single .py files.
Without PATHS or --module, the [sources] table of the config file is used.
""",
)
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(path_type=Path),
)
@click.option(
    "--format",
    "output_format",
    type=str,
    default=None,
    help="Catalog format: 'html' renders HTML; any other value renders plain text.",
)
@click.option(
    "--plugin-prefix",
    "plugin_prefix",
    default=None,
    help="Package prefix before '.plugin.' (e.g. 'org.example'). Default: any prefix.",
)
@click.option(
    "--marker",
    "marker_name",
    default=None,
    help="Decorator name that tags command classes (default: 'command').",
)
@click.option(
    "--module",
    "-m",
    "modules",
    multiple=True,
    help="Import this module and catalog its tagged classes (repeatable).",
)
@click.option(
    "--exclude",
    "-e",
    "exclude_patterns",
    multiple=True,
    help="Skip files matching this gitignore-style pattern (repeatable).",
)
@click.option(
    "--output",
    "-o",
    "output",
    default=None,
    help="Write the catalog to this file ('-' for stdout, the default).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read configuration from this TOML file instead of discovering one.",
)
@click.option(
    "--no-config",
    "no_config",
    is_flag=True,
    help="Ignore configuration files.",
)
def generate_command(
    *,
    paths: tuple[Path, ...],
    output_format: str | None,
    plugin_prefix: str | None,
    marker_name: str | None,
    modules: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    output: str | None,
    config_path: Path | None,
    no_config: bool,
) -> None:
    """Render the command catalog.

    Args:
        paths (tuple[Path, ...]): Source roots to scan statically.
        output_format (str | None): Raw format selection value.
        plugin_prefix (str | None): Package prefix before ``.plugin.``.
        marker_name (str | None): Decorator name recognized by the scanner.
        modules (tuple[str, ...]): Modules to import and inspect.
        exclude_patterns (tuple[str, ...]): Gitignore-style exclude patterns.
        output (str | None): Output file, or ``-`` for stdout.
        config_path (Path | None): Explicit config file.
        no_config (bool): Ignore config files.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if config_path is not None and no_config:
        raise CatalogUsageError("The '--config' and '--no-config' options are mutually exclusive.")

    config: Config = (
        MutableConfig.load_merged(config_path=config_path, no_config=no_config)
        .apply_cli_args(
            {
                "output_format": output_format,
                "plugin_prefix": plugin_prefix,
                "marker_name": marker_name,
                "output": output,
                "paths": paths,
                "modules": modules,
                "exclude_patterns": exclude_patterns,
            }
        )
        .freeze()
    )
    if config_path is not None and config_path not in config.config_files:
        raise CatalogConfigError(f"No [tool.cmdcatalog] table in {config_path}")
    logger.debug("Effective config: %s", config)
    vlevel: int = get_effective_verbosity(ctx, config)

    source: DeclarationSource | None = build_declaration_source(config)
    if source is None:
        raise CatalogUsageError(
            "Nothing to scan: pass PATHS or --module, or configure [sources] in cmdcatalog.toml."
        )

    try:
        snapshot = StaticDeclarationSource(source.iter_declarations())
    except DeclarationSourceError as exc:
        logger.error("Declaration source failed: %s", exc)
        raise from_source_error(exc) from exc
    except Exception as exc:
        logger.exception("Unexpected failure while collecting declarations")
        raise CatalogUnexpectedError(
            f"Unexpected error while collecting declarations: {exc!r}"
        ) from exc

    try:
        with click.open_file(config.output, "w", encoding="utf-8") as out:
            catalog: Catalog = generate_catalog(snapshot, out, config=config)
    except OSError as exc:
        logger.error("Cannot write catalog to %s: %s", config.output, exc)
        raise CatalogIOError(f"Cannot write catalog to {config.output}: {exc}") from exc

    if catalog.is_empty and vlevel >= 0:
        console.warn("No tagged command classes found.")
    if vlevel > 0:
        console.note(
            console.styled(
                f"Rendered {len(catalog.entries)} command(s) in {len(catalog.groups)} group(s) "
                f"as {config.output_format.value}.",
                bold=True,
            )
        )
