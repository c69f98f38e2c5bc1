#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/strtools/filters.py
"""Character-class filters and simple content predicates.

Letters are the ASCII Latin letters plus the basic Cyrillic alphabet
(``а-я``, ``А-Я``). Digits are ASCII ``0-9``. Spaces are any Unicode
whitespace.
"""

from __future__ import annotations

import logging

from strtools.constants import (
    CANONICAL_INT_PATTERN,
    DIGITS_ONLY_PATTERN,
    INT64_MAX,
    INT64_MIN,
    NON_ALNUM_PATTERN,
    NON_ALNUM_SPACE_PATTERN,
    NON_DIGIT_PATTERN,
    NON_LETTER_PATTERN,
    NON_LETTER_SPACE_PATTERN,
)

logger = logging.getLogger(__name__)


def keep_only_numbers(text: str) -> str:
    """Remove everything except ASCII digits."""
    return NON_DIGIT_PATTERN.sub("", text)


def keep_only_letters(text: str) -> str:
    """Remove everything except Latin and Cyrillic letters."""
    return NON_LETTER_PATTERN.sub("", text)


def keep_only_letters_and_spaces(text: str) -> str:
    """Remove everything except letters and whitespace."""
    return NON_LETTER_SPACE_PATTERN.sub("", text)


def keep_only_numbers_and_letters(text: str) -> str:
    """Remove everything except letters and digits."""
    return NON_ALNUM_PATTERN.sub("", text)


def keep_only_numbers_letters_and_spaces(text: str) -> str:
    """Remove everything except letters, digits and whitespace."""
    return NON_ALNUM_SPACE_PATTERN.sub("", text)


def has_only_numbers(text: str) -> bool:
    """Check that ``text`` is non-empty and made of ASCII digits only.

    Examples
    --------
        >>> has_only_numbers("0042")
        True
        >>> has_only_numbers("")
        False

    """
    return DIGITS_ONLY_PATTERN.fullmatch(text) is not None


def has_int(text: str) -> bool:
    """Check that ``text`` is a canonical base-10 integer.

    The text must read back identically after an integer round trip: an
    optional minus sign, no plus sign, no leading zeros, no surrounding
    whitespace, and a value inside the signed 64-bit range.

    Parameters
    ----------
    text : str
        Candidate integer literal

    Returns
    -------
    bool
        True if ``text`` is a canonical integer literal

    Examples
    --------
        >>> has_int("-15")
        True
        >>> has_int("015")
        False
        >>> has_int("+15")
        False

    """
    if CANONICAL_INT_PATTERN.fullmatch(text) is None:
        return False
    return INT64_MIN <= int(text) <= INT64_MAX


def is_aliquot(text: str, divisor: int) -> bool:
    """Check whether the code-point length of ``text`` is a multiple of ``divisor``.

    A zero divisor never divides anything and returns False.
    """
    if divisor == 0:
        logger.debug("is_aliquot called with a zero divisor")
        return False
    return len(text) % divisor == 0
