# topmark:header:start
#
#   project      : CmdCatalog
#   file         : scanner.py
#   file_relpath : src/cmdcatalog/sources/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Static declaration source: scan Python files without importing them.

Each root is either a directory, scanned recursively for ``*.py`` files, or a
single ``.py`` file. Module names come from the file path relative to its root,
so a root should be the directory that holds the top-level packages (e.g.
``src``)::

    src/org/example/plugin/net/impl.py      -> module  org.example.plugin.net.impl
                                               package org.example.plugin.net
    src/org/example/plugin/net/__init__.py  -> module  org.example.plugin.net
                                               package org.example.plugin.net

Every class (nested classes included) becomes a declaration. A class is tagged
when one of its decorators is a call to the marker, either by bare name
(``@command(...)``) or as an attribute (``@cmdcatalog.command(...)``). Marker
arguments must be string literals since the file is never executed.

Exclude patterns use gitignore semantics (via ``pathspec``) and are matched
against the POSIX path relative to the root.
"""

from __future__ import annotations

import ast
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from cmdcatalog.config.logging import get_logger
from cmdcatalog.constants import DEFAULT_MARKER_NAME
from cmdcatalog.errors import DeclarationSourceError, SourceNotFoundError, SourceParseError
from cmdcatalog.marker import CommandMarker
from cmdcatalog.model import Declaration

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from cmdcatalog.config.logging import CatalogLogger

logger: CatalogLogger = get_logger(__name__)

_INIT_MODULE: str = "__init__"


def module_names_for(rel_path: Path) -> tuple[str, str]:
    """Return ``(module_name, package_name)`` for a path relative to its root.

    Args:
        rel_path (Path): Path of a ``.py`` file relative to the scan root.

    Returns:
        tuple[str, str]: Dotted module and package names. A top-level module has
            an empty package name.
    """
    parts: list[str] = list(rel_path.with_suffix("").parts)
    if parts and parts[-1] == _INIT_MODULE:
        parts.pop()
        dotted: str = ".".join(parts)
        return dotted, dotted
    return ".".join(parts), ".".join(parts[:-1])


class PythonSourceScanner:
    """Declaration source backed by a static scan of Python source files.

    Args:
        roots (Iterable[Path | str]): Directories or ``.py`` files to scan.
        marker_name (str): Decorator name that tags a command class.
        exclude_patterns (Iterable[str]): Gitignore-style patterns of files to skip.
    """

    def __init__(
        self,
        roots: Iterable[Path | str],
        *,
        marker_name: str = DEFAULT_MARKER_NAME,
        exclude_patterns: Iterable[str] = (),
    ) -> None:
        self.roots: tuple[Path, ...] = tuple(Path(r) for r in roots)
        self.marker_name: str = marker_name
        self.exclude_patterns: tuple[str, ...] = tuple(exclude_patterns)
        self._exclude_spec: PathSpec = PathSpec.from_lines(
            GitWildMatchPattern, self.exclude_patterns
        )

    def iter_declarations(self) -> Iterator[Declaration]:
        """Yield the declarations of every scanned file, root by root.

        Raises:
            SourceNotFoundError: If a root does not exist.
            DeclarationSourceError: If a file cannot be read.
            SourceParseError: If a file cannot be decoded or parsed, or a marker
                argument is not a string literal.
        """
        for root in self.roots:
            for path, rel in self._iter_files(root):
                module_name, package_name = module_names_for(rel)
                yield from self._scan_file(path, module_name, package_name)

    def _iter_files(self, root: Path) -> Iterator[tuple[Path, Path]]:
        if not root.exists():
            raise SourceNotFoundError(f"Source root does not exist: {root}", path=root)
        if root.is_file():
            yield root, Path(root.name)
            return

        files: list[Path] = sorted(p for p in root.rglob("*.py") if p.is_file())
        logger.debug("Found %d Python file(s) below %s", len(files), root)
        for path in files:
            rel: Path = path.relative_to(root)
            if self._exclude_spec.match_file(rel.as_posix()):
                logger.trace("Excluded by pattern: %s", path)
                continue
            yield path, rel

    def _scan_file(self, path: Path, module_name: str, package_name: str) -> Iterator[Declaration]:
        logger.trace("Scanning %s (module %s)", path, module_name)
        try:
            source: bytes = path.read_bytes()
        except OSError as exc:
            raise DeclarationSourceError(f"Cannot read {path}: {exc}", path=path) from exc
        try:
            tree: ast.Module = ast.parse(source, filename=str(path))
        except (SyntaxError, UnicodeDecodeError, ValueError) as exc:
            raise SourceParseError(f"Cannot parse {path}: {exc}", path=path) from exc

        yield from self._walk_classes(
            tree.body,
            prefix=f"{module_name}." if module_name else "",
            package_name=package_name,
            path=path,
        )

    def _walk_classes(
        self,
        body: list[ast.stmt],
        *,
        prefix: str,
        package_name: str,
        path: Path,
    ) -> Iterator[Declaration]:
        for node in body:
            if not isinstance(node, ast.ClassDef):
                continue
            qualified_name: str = f"{prefix}{node.name}"
            yield Declaration(
                qualified_name=qualified_name,
                package_name=package_name,
                source_file=str(path),
                doc=ast.get_docstring(node) or "",
                marker=self._find_marker(node, path),
            )
            yield from self._walk_classes(
                node.body,
                prefix=f"{qualified_name}.",
                package_name=package_name,
                path=path,
            )

    def _find_marker(self, node: ast.ClassDef, path: Path) -> CommandMarker | None:
        for deco in node.decorator_list:
            if not isinstance(deco, ast.Call):
                continue
            func: ast.expr = deco.func
            if isinstance(func, ast.Name):
                deco_name: str = func.id
            elif isinstance(func, ast.Attribute):
                deco_name = func.attr
            else:
                continue
            if deco_name == self.marker_name:
                return self._read_marker(deco, node, path)
        return None

    def _read_marker(self, call: ast.Call, node: ast.ClassDef, path: Path) -> CommandMarker:
        values: dict[str, ast.expr] = dict(zip(("name", "options"), call.args))
        values.update({kw.arg: kw.value for kw in call.keywords if kw.arg is not None})

        def _literal(field: str, default: str | None) -> str:
            expr: ast.expr | None = values.get(field)
            if expr is None:
                if default is None:
                    raise SourceParseError(
                        f"{path}:{call.lineno}: @{self.marker_name} on {node.name} has no {field!r}",
                        path=path,
                    )
                return default
            if isinstance(expr, ast.Constant) and isinstance(expr.value, str):
                return expr.value
            raise SourceParseError(
                f"{path}:{expr.lineno}: @{self.marker_name} argument {field!r} on {node.name} "
                "must be a string literal",
                path=path,
            )

        return CommandMarker(name=_literal("name", None), options=_literal("options", ""))
