# topmark:header:start
#
#   project      : CmdCatalog
#   file         : marker.py
#   file_relpath : src/cmdcatalog/marker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The marker that opts a class into the command catalog.

Plugin code tags its command classes with the [`command`][cmdcatalog.marker.command]
decorator:

```python
from cmdcatalog import command


@command(name="ping", options="force,verbose")
class PingCommand:
    def run(self) -> None: ...
```

The decorator only records a [`CommandMarker`][cmdcatalog.marker.CommandMarker] on
the class. Static scanning recognizes the decorator syntactically; runtime
inspection reads the recorded attribute.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from cmdcatalog.constants import MARKER_ATTRIBUTE

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T", bound=type)


@dataclass(frozen=True, slots=True)
class CommandMarker:
    """Raw marker fields as written on the decorator.

    Attributes:
        name (str): Catalog entry identifier.
        options (str): Raw comma-separated option list (may be blank).
    """

    name: str
    options: str = ""


def command(name: str, options: str = "") -> Callable[[T], T]:
    """Tag a class as a catalog command.

    Args:
        name (str): Catalog entry identifier.
        options (str): Raw comma-separated option list.

    Returns:
        Callable[[T], T]: A class decorator returning the class unchanged apart
            from the recorded marker.
    """

    def _decorate(cls: T) -> T:
        setattr(cls, MARKER_ATTRIBUTE, CommandMarker(name=name, options=options))
        return cls

    return _decorate


def get_marker(cls: type) -> CommandMarker | None:
    """Return the marker declared directly on ``cls``.

    Markers are not inherited: a subclass of a tagged class is not itself a
    catalog entry unless it is tagged too.
    """
    marker: object = cls.__dict__.get(MARKER_ATTRIBUTE)
    return marker if isinstance(marker, CommandMarker) else None
