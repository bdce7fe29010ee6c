# topmark:header:start
#
#   project      : CmdCatalog
#   file         : cli_types.py
#   file_relpath : src/cmdcatalog/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types for the informational commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

import click

if TYPE_CHECKING:

    class ParamTypeBase(Protocol):
        """Typed stand-in for `click.ParamType` while type checking."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class ReportFormat(str, Enum):
    """Layout of the ``version`` report.

    Attributes:
        TEXT: The bare version string (a banner when verbose).
        MARKDOWN: A small Markdown document.
    """

    TEXT = "text"
    MARKDOWN = "markdown"


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """Accept one of an Enum's string values, ignoring case, and yield the member."""

    enum_cls: type[E]
    name: str

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self._by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted values, in declaration order."""
        return list(self._by_value)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Map ``value`` onto its Enum member or fail with a usage error."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self._by_value.get(str(value).lower())
        if member is None:
            raise click.BadParameter(
                f"'{value}' is not one of: {', '.join(self.choices)}", param=param, ctx=ctx
            )
        return member
