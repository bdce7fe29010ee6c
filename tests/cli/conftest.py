# topmark:header:start
#
#   project      : CmdCatalog
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running CmdCatalog in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative source roots and config discovery
resolve against the temporary test directory.
"""

from __future__ import annotations

import os
from textwrap import dedent
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from cmdcatalog.cli.exit_codes import ExitCode
from cmdcatalog.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

NET_MODULE = dedent(
    '''\
    from cmdcatalog import command


    @command(name="ping", options="force,verbose")
    class PingCommand:
        """Sends a ping.
        @since 1.0
        """


    @command("get")
    class GetCommand:
        """Fetches a value."""


    class Helper:
        pass
    '''
)


def write_plugin_tree(root: Path) -> Path:
    """Create ``src/org/example/plugin/net/impl.py`` below ``root``.

    Returns:
        Path: The ``src`` directory (the scan root).
    """
    src: Path = root / "src"
    pkg: Path = src / "org" / "example" / "plugin" / "net"
    pkg.mkdir(parents=True)
    (pkg / "impl.py").write_text(NET_MODULE, encoding="utf-8")
    return src


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["generate", "src"]`.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files created in
    ``tmp_path`` (e.g., ``--help`` / ``version``) or when all provided paths are
    absolute.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
