# topmark:header:start
#
#   project      : CmdCatalog
#   file         : text.py
#   file_relpath : src/cmdcatalog/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure text transforms applied to raw marker and documentation fields."""

from __future__ import annotations

from cmdcatalog.constants import DOC_TAG_PREFIX


def _split_lines(text: str) -> list[str]:
    if not text:
        return [""]
    lines: list[str] = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    # Trailing empty lines carry no content
    while lines and not lines[-1]:
        lines.pop()
    return lines


def trim_doc(doc: str | None) -> str:
    """Normalize a raw documentation string into description text.

    Line endings are normalized to ``\\n``. Each line loses exactly one leading
    space (not all leading whitespace). Processing stops at the first line that
    starts with ``@`` (a documentation tag); that line and all following lines are
    dropped. Surviving lines are joined, each terminated by a newline. An empty
    string is a single empty line and gives ``"\\n"``; ``None`` gives ``""``.

    Args:
        doc (str | None): Raw documentation text.

    Returns:
        str: The description text; empty, or newline-terminated.

    Examples:
        >>> trim_doc(" Sends a ping.\\n@since 1.0")
        'Sends a ping.\\n'
        >>> trim_doc("@deprecated")
        ''
        >>> trim_doc("")
        '\\n'
    """
    if doc is None:
        return ""
    parts: list[str] = []
    for line in _split_lines(doc):
        if line.startswith(" "):
            line = line[1:]
        if line.startswith(DOC_TAG_PREFIX):
            break
        parts.append(line + "\n")
    return "".join(parts)


def parse_command_options(options: str) -> tuple[str, ...]:
    """Split a raw comma-separated option string into option tokens.

    Surrounding whitespace is trimmed first; a blank string yields no options.
    Tokens are split on bare commas without quoting or escaping and are not
    trimmed individually. Trailing empty tokens are dropped (``"a,b,"`` gives
    ``("a", "b")``).

    Note:
        An option value containing a comma cannot be expressed.

    Args:
        options (str): Raw option string from the marker.

    Returns:
        tuple[str, ...]: Option tokens in source order.
    """
    stripped: str = options.strip()
    if not stripped:
        return ()
    tokens: list[str] = stripped.split(",")
    while tokens and not tokens[-1]:
        tokens.pop()
    return tuple(tokens)
