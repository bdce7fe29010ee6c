# topmark:header:start
#
#   project      : CmdCatalog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the CmdCatalog test suite.

This file sets up global fixtures, typed mark wrappers and small builders for
catalog model objects, and raises the internal log level to TRACE for test runs.

Notes:
    Build configs using `cmdcatalog.config.MutableConfig`, then `freeze()` into
    a `cmdcatalog.config.Config`. Do **not** mutate a frozen `Config`; call
    `Config.thaw()` and freeze again instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from cmdcatalog.config import MutableConfig, logging
from cmdcatalog.constants import LOG_LEVEL_ENV_VAR
from cmdcatalog.marker import CommandMarker
from cmdcatalog.model import CommandMetadata, Declaration

if TYPE_CHECKING:
    from cmdcatalog.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_cmdcatalog_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure CmdCatalog's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the internal log level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_declaration(
    qualified_name: str,
    *,
    package_name: str | None = None,
    name: str | None = None,
    options: str = "",
    doc: str = "",
    source_file: str | None = None,
    tagged: bool = True,
) -> Declaration:
    """Return a declaration for ``qualified_name``, tagged by default.

    The package defaults to everything before the last two dotted parts
    (``pkg.module.Class`` -> ``pkg``), the command name to the lowercased class
    name and the source file to a path derived from the module name.
    """
    module, _, cls_name = qualified_name.rpartition(".")
    if package_name is None:
        package_name = module.rpartition(".")[0]
    if source_file is None:
        source_file = module.replace(".", "/") + ".py"
    marker: CommandMarker | None = (
        CommandMarker(name=name or cls_name.lower(), options=options) if tagged else None
    )
    return Declaration(
        qualified_name=qualified_name,
        package_name=package_name,
        source_file=source_file,
        doc=doc,
        marker=marker,
    )


def make_entry(
    name: str,
    package_name: str = "org.example.plugin.core",
    *,
    options: str = "",
    doc: str = "",
) -> CommandMetadata:
    """Return a catalog entry for command ``name`` in ``package_name``."""
    cls_name: str = name.capitalize() + "Command"
    return CommandMetadata.from_declaration(
        make_declaration(
            f"{package_name}.impl.{cls_name}",
            package_name=package_name,
            name=name,
            options=options,
            doc=doc,
        )
    )


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and CLI-style overrides.

    Args:
        **overrides (Any): Keys accepted by `MutableConfig.apply_cli_args`.

    Returns:
        Config: The frozen snapshot.
    """
    return MutableConfig.from_defaults().apply_cli_args(overrides).freeze()
