#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/strtools/lines.py
"""Line, splitting and markup-stripping helpers.

Carriage returns are always discarded before lines are inspected, so
``\\r\\n`` and ``\\n`` line endings behave the same way.
"""

from __future__ import annotations

from strtools.constants import (
    BBCODE_PATTERN,
    DEFAULT_LINE_COUNT,
    DEFAULT_LINE_SEPARATOR,
    DEFAULT_SPLIT_DELIMITER,
    INDEX_DISALLOWED_PATTERN,
    TRIM_CHARS,
)
from strtools.substrings import clear_spaces


def to_array(text: str, delimiter: str = DEFAULT_SPLIT_DELIMITER) -> list[str]:
    """Split ``text`` on ``delimiter``.

    When splitting on a single space, whitespace runs are collapsed and the
    ends are trimmed first so that no empty items appear for repeated spaces.

    Parameters
    ----------
    text : str
        Text to split
    delimiter : str, default " "
        Separator. An empty delimiter cannot split anything and yields
        ``[text]``.

    Returns
    -------
    list[str]
        Split parts

    Examples
    --------
        >>> to_array("  one   two three ")
        ['one', 'two', 'three']
        >>> to_array("a,b,,c", ",")
        ['a', 'b', '', 'c']

    """
    if not delimiter:
        return [text]
    if delimiter == " ":
        text = clear_spaces(text).strip(TRIM_CHARS)
    return text.split(delimiter)


def remove_bbcode(text: str) -> str:
    """Strip every ``[...]`` tag from ``text``.

    Matching is non-greedy and nested brackets are not understood, so
    ``[b]bold[/b]`` becomes ``bold``.
    """
    return BBCODE_PATTERN.sub("", text)


def to_index(text: str) -> str:
    """Convert ``text`` to a lowercase ``[0-9a-z_]`` index key.

    Tabs and line breaks become spaces, whitespace runs collapse, spaces turn
    into underscores and everything else outside ``[0-9A-Za-z_]`` is dropped.

    Examples
    --------
        >>> to_index("Hello   World!")
        'hello_world'

    """
    text = text.replace("\t", " ")
    text = to_line(text)
    text = clear_spaces(text)
    text = text.replace(" ", "_")
    # Filtering before lowering keeps case folding ASCII-only
    text = INDEX_DISALLOWED_PATTERN.sub("", text)
    return text.lower()


def get_first_line(text: str) -> str:
    """Return the first line of ``text``."""
    return text.replace("\r", "").split("\n")[0]


def remove_lines(text: str) -> str:
    """Remove every carriage return and line feed."""
    return text.replace("\r", "").replace("\n", "")


def to_line(text: str, separator: str = DEFAULT_LINE_SEPARATOR) -> str:
    """Join the lines of ``text`` with ``separator``."""
    return text.replace("\r", "").replace("\n", separator)


def get_lines(text: str, count: int = DEFAULT_LINE_COUNT) -> str:
    """Return the first ``count`` lines of ``text``.

    Parameters
    ----------
    text : str
        Source text
    count : int, default 1
        Number of lines to keep. Values below 1 keep the first line.

    Returns
    -------
    str
        The whole text (without carriage returns) when it has at most
        ``count`` lines, otherwise the leading lines joined with ``\\n``

    """
    text = text.replace("\r", "")
    lines = text.split("\n")

    if len(lines) <= count:
        return text
    return "\n".join(lines[: max(count, 1)])
