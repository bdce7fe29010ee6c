# topmark:header:start
#
#   project      : CmdCatalog
#   file         : modules.py
#   file_relpath : src/cmdcatalog/sources/modules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime declaration source: import modules and inspect their classes.

Only classes defined in the imported module itself are reported (re-exported
classes belong to their own module). The marker is read from the class's own
namespace, so subclasses of tagged classes are not tagged implicitly.
"""

from __future__ import annotations

import importlib
import inspect
from typing import TYPE_CHECKING

from cmdcatalog.config.logging import get_logger
from cmdcatalog.errors import SourceImportError
from cmdcatalog.marker import get_marker
from cmdcatalog.model import Declaration

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from types import ModuleType

    from cmdcatalog.config.logging import CatalogLogger

logger: CatalogLogger = get_logger(__name__)


def _package_of(module: ModuleType) -> str:
    package: str | None = module.__package__
    if package is not None:
        return package
    return module.__name__.rpartition(".")[0]


class ModuleDeclarationSource:
    """Declaration source backed by importing modules by name.

    Args:
        module_names (Iterable[str]): Dotted names of the modules to inspect.
    """

    def __init__(self, module_names: Iterable[str]) -> None:
        self.module_names: tuple[str, ...] = tuple(module_names)

    def iter_declarations(self) -> Iterator[Declaration]:
        """Yield one declaration per class, module by module, in definition order.

        Raises:
            SourceImportError: If a module cannot be imported.
        """
        for name in self.module_names:
            try:
                module: ModuleType = importlib.import_module(name)
            except Exception as exc:
                raise SourceImportError(f"Cannot import module {name!r}: {exc}") from exc
            logger.debug("Inspecting module %s", module.__name__)
            yield from self._declarations_in(module)

    def _declarations_in(self, module: ModuleType) -> Iterator[Declaration]:
        seen: set[int] = set()
        package_name: str = _package_of(module)
        source_file: str = str(getattr(module, "__file__", None) or "")

        def _walk(namespace: dict[str, object], qualprefix: str) -> Iterator[Declaration]:
            for obj in list(namespace.values()):
                if not inspect.isclass(obj) or id(obj) in seen:
                    continue
                if obj.__module__ != module.__name__:
                    continue
                if obj.__qualname__ != f"{qualprefix}{obj.__name__}":
                    # Alias of a class defined elsewhere in the module
                    continue
                seen.add(id(obj))
                yield Declaration(
                    qualified_name=f"{module.__name__}.{obj.__qualname__}",
                    package_name=package_name,
                    source_file=source_file,
                    doc=inspect.cleandoc(obj.__doc__) if obj.__doc__ else "",
                    marker=get_marker(obj),
                )
                yield from _walk(dict(vars(obj)), f"{obj.__qualname__}.")

        yield from _walk(dict(vars(module)), "")
