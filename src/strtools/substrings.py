#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/strtools/substrings.py
"""Code-point based substring, padding and wrapping helpers.

All positions and lengths are counted in Unicode code points. Offsets
follow substring semantics: a negative start counts from the end of the
string, and a negative length omits that many code points from the end.

Functions
---------
get_extension : Text after the last dot of a file name
clear_spaces : Collapse whitespace runs into one space
complete_left, complete_right : Pad to a given length
get_left, get_right, remove_left, remove_right : Edge slicing
compare_left, compare_right : Prefix and suffix checks
get_position, remove_position : Single code point access
exist_substring : Containment check
invert_slashes, wrap : Simple rewrites

Examples
--------
    >>> complete_left("5", 3)
    '005'
    >>> get_right("hello", 3)
    'llo'
    >>> wrap("x", "[", "]")
    '[x]'

"""

from __future__ import annotations

from strtools.constants import DEFAULT_PAD_SYMBOL, MULTI_SPACE_PATTERN


def _slice(text: str, start: int, length: int | None = None) -> str:
    """Return a substring using start/length offsets.

    Parameters
    ----------
    text : str
        Source text
    start : int
        Start offset. Negative values count from the end and are clamped
        to the beginning of the string.
    length : int or None, default None
        Number of code points to take. None takes the rest of the string,
        a negative value stops that many code points before the end.

    Returns
    -------
    str
        The selected substring, possibly empty

    """
    size = len(text)
    if start < 0:
        start = max(size + start, 0)
    if start >= size:
        return ""

    if length is None:
        end = size
    elif length < 0:
        end = size + length
    else:
        end = start + length

    if end <= start:
        return ""
    return text[start:end]


def get_extension(filename: str) -> str:
    """Return the part of ``filename`` after its last dot.

    Parameters
    ----------
    filename : str
        File name or path

    Returns
    -------
    str
        Extension without the dot, or an empty string when there is no dot

    Examples
    --------
        >>> get_extension("archive.tar.gz")
        'gz'
        >>> get_extension("README")
        ''

    """
    _, dot, extension = filename.rpartition(".")
    if not dot:
        return ""
    return extension


def clear_spaces(text: str) -> str:
    """Collapse runs of two or more ASCII whitespace characters into a single space.

    Leading and trailing whitespace is collapsed too but never removed.
    """
    return MULTI_SPACE_PATTERN.sub(" ", text)


def complete_left(text: str, length: int, symbol: str = DEFAULT_PAD_SYMBOL) -> str:
    """Left-pad ``text`` with ``symbol`` up to ``length`` code points.

    Parameters
    ----------
    text : str
        Text to pad
    length : int
        Target length. Longer input is returned as is, never truncated.
    symbol : str, default "0"
        Padding character. Anything other than a single character leaves
        the text unchanged.

    Returns
    -------
    str
        Padded text

    Examples
    --------
        >>> complete_left("5", 3)
        '005'
        >>> complete_left("555", 2)
        '555'

    """
    if len(symbol) != 1:
        return text
    return text.rjust(length, symbol)


def complete_right(text: str, length: int, symbol: str = DEFAULT_PAD_SYMBOL) -> str:
    """Right-pad ``text`` with ``symbol`` up to ``length`` code points.

    See Also
    --------
    complete_left : Same rules, padding on the left

    """
    if len(symbol) != 1:
        return text
    return text.ljust(length, symbol)


def invert_slashes(text: str) -> str:
    """Replace every backslash with a forward slash."""
    return text.replace("\\", "/")


def get_left(text: str, length: int) -> str:
    """Return the first ``length`` code points of ``text``.

    A negative ``length`` returns everything except the last ``-length``
    code points.
    """
    return _slice(text, 0, length)


def get_right(text: str, length: int) -> str:
    """Return the last ``length`` code points of ``text``.

    A zero length yields an empty string, and a length larger than the text
    yields the whole text.
    """
    return _slice(text, -length, length)


def remove_left(text: str, length: int) -> str:
    """Drop the first ``length`` code points of ``text``."""
    return _slice(text, length)


def remove_right(text: str, length: int) -> str:
    """Drop the last ``length`` code points of ``text``.

    Dropping more code points than the text holds returns an empty string.
    """
    if length == 0:
        return text
    return _slice(text, 0, -length)


def compare_left(text: str, substring: str) -> bool:
    """Check whether ``text`` starts with ``substring``."""
    if len(text) < len(substring):
        return False
    return text.startswith(substring)


def compare_right(text: str, substring: str) -> bool:
    """Check whether ``text`` ends with ``substring``."""
    if len(text) < len(substring):
        return False
    return text.endswith(substring)


def get_position(text: str, position: int) -> str:
    """Return the code point at ``position``.

    Parameters
    ----------
    text : str
        Source text
    position : int
        Index of the code point, negative values count from the end

    Returns
    -------
    str
        A single code point, or an empty string when ``position`` is out of range

    """
    if -len(text) <= position < len(text):
        return text[position]
    return ""


def remove_position(text: str, position: int) -> str:
    """Return ``text`` without the code point at ``position``.

    Positive positions are rebuilt from the left and right parts around the
    removed code point. Position 0 is never removed and is returned
    unchanged, as are positions outside the text.

    Parameters
    ----------
    text : str
        Source text
    position : int
        Index of the code point to remove, negative values count from the end

    Returns
    -------
    str
        Text with one code point removed, or the input unchanged

    Examples
    --------
        >>> remove_position("abcd", 1)
        'acd'
        >>> remove_position("abcd", -1)
        'abc'
        >>> remove_position("abcd", 0)
        'abcd'

    """
    length = len(text)

    if 0 < position < length:
        return get_left(text, position) + get_right(text, length - position - 1)
    if -length <= position < 0:
        cut = length + position
        return text[:cut] + text[cut + 1 :]
    return text


def exist_substring(text: str, substring: str) -> bool:
    """Check whether ``text`` equals or contains ``substring``."""
    if text == substring:
        return True
    return substring in text


def wrap(text: str, wrap_left: str, wrap_right: str | None = None) -> str:
    """Surround ``text`` with ``wrap_left`` and ``wrap_right``.

    When ``wrap_right`` is omitted ``wrap_left`` is used on both sides.
    """
    if wrap_right is None:
        return wrap_left + text + wrap_left
    return wrap_left + text + wrap_right
