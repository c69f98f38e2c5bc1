#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/strtools/encoding.py
"""URL-safe base64 and random character helpers.

The URL-safe variant replaces ``+`` and ``/`` with ``-`` and ``_`` and
drops the ``=`` padding so that the result can be placed in a URL or a
file name without escaping.

Text is converted to bytes as UTF-8 with the ``surrogateescape`` error
handler in both directions. Decoding a payload that is not valid UTF-8
therefore yields surrogate code points instead of failing, and encoding
that text again restores the original bytes.
"""

from __future__ import annotations

import base64
import binascii
import logging
import secrets

from strtools.constants import (
    BASE64_ALPHABET_PATTERN,
    DEFAULT_RANDOM_LENGTH,
    RANDOM_CHAR_MAX,
    RANDOM_CHAR_MIN,
)
from strtools.filters import is_aliquot

logger = logging.getLogger(__name__)

_TEXT_ENCODING = "utf-8"
_TEXT_ERRORS = "surrogateescape"


def base64_safe_encode(data: str | bytes) -> str:
    """Encode ``data`` as unpadded URL-safe base64.

    Parameters
    ----------
    data : str or bytes
        Payload. Text is encoded as UTF-8 first.

    Returns
    -------
    str
        Base64 text using ``-`` and ``_`` without ``=`` padding

    Examples
    --------
        >>> base64_safe_encode("hello?")
        'aGVsbG8_'

    """
    if isinstance(data, str):
        data = data.encode(_TEXT_ENCODING, _TEXT_ERRORS)

    encoded = base64.b64encode(data).decode("ascii")
    return encoded.replace("=", "").replace("+", "-").replace("/", "_")


def _decode_lenient(encoded: str) -> bytes:
    """Decode base64 text, ignoring junk characters and a dangling final character."""
    try:
        return base64.b64decode(encoded)
    # binascii.Error for bad padding, plain ValueError for non-ASCII text
    except (binascii.Error, ValueError) as e:
        logger.debug(f"Repairing malformed base64 input: {e}")

    cleaned = BASE64_ALPHABET_PATTERN.sub("", encoded)
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned)


def base64_safe_decode(encoded: str) -> str:
    """Decode unpadded URL-safe base64 produced by :func:`base64_safe_encode`.

    Padding is restored by appending ``len(encoded) % 4`` ``=`` characters
    whenever the length is not a multiple of four. This count differs from
    canonical base64 padding for three-character tails; the decoder stops at
    the first complete padding group so the extra ``=`` is harmless.

    Parameters
    ----------
    encoded : str
        URL-safe base64 text

    Returns
    -------
    str
        Decoded text

    """
    if not is_aliquot(encoded, 4):
        encoded += "=" * (len(encoded) % 4)
    encoded = encoded.replace("-", "+").replace("_", "/")
    return _decode_lenient(encoded).decode(_TEXT_ENCODING, _TEXT_ERRORS)


def get_random_chars(length: int = DEFAULT_RANDOM_LENGTH) -> str:
    """Generate ``length`` random printable ASCII characters.

    Characters are drawn uniformly from code points 32 to 126 using the
    :mod:`secrets` module. Lengths below 1 produce a single character.
    """
    length = max(length, 1)
    span = RANDOM_CHAR_MAX - RANDOM_CHAR_MIN + 1
    return "".join(chr(RANDOM_CHAR_MIN + secrets.randbelow(span)) for _ in range(length))
