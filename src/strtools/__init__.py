"""strtools - Small, stateless helpers for everyday string handling.

strtools collects pure functions for substring access, padding, character
filtering, line handling, light URL parsing, URL-safe base64 and
Latin/Cyrillic transliteration. Every helper works on Unicode code points,
keeps no state, and returns an empty or unchanged value for degenerate
input instead of raising.

Key Features
------------
- Code-point based slicing with substring-style negative offsets
- Character-class filters for Latin, Cyrillic, digits and whitespace
- Line helpers that treat ``\\r\\n`` and ``\\n`` the same way
- Host, query and YouTube id extraction without raising on bad URLs
- Unpadded URL-safe base64 and cryptographically secure random characters
- Ordered transliteration tables in both directions

Requirements
------------
- Python 3.10+

Examples
--------
    >>> import strtools
    >>> strtools.complete_left("7", 3)
    '007'
    >>> strtools.to_index("Hello   World!")
    'hello_world'
    >>> strtools.translit_to_eng("Привет")
    'Privet'

Applications that want the library's debug records can use
:func:`strtools.config.setup_logging`.

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "strtools requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from strtools.encoding import base64_safe_decode, base64_safe_encode, get_random_chars
from strtools.exceptions import ConfigError, StrToolsError, ValidationError
from strtools.filters import (
    has_int,
    has_only_numbers,
    is_aliquot,
    keep_only_letters,
    keep_only_letters_and_spaces,
    keep_only_numbers,
    keep_only_numbers_and_letters,
    keep_only_numbers_letters_and_spaces,
)
from strtools.lines import (
    get_first_line,
    get_lines,
    remove_bbcode,
    remove_lines,
    to_array,
    to_index,
    to_line,
)
from strtools.substrings import (
    clear_spaces,
    compare_left,
    compare_right,
    complete_left,
    complete_right,
    exist_substring,
    get_extension,
    get_left,
    get_position,
    get_right,
    invert_slashes,
    remove_left,
    remove_position,
    remove_right,
    wrap,
)
from strtools.translit import CYRILLIC_TO_LATIN, LATIN_TO_CYRILLIC, translit_to_eng, translit_to_rus
from strtools.urls import add_http, extract_youtube_id, get_site_address, get_url_params

__all__ = [
    "__version__",
    # File/extension
    "get_extension",
    # Whitespace/formatting
    "clear_spaces",
    "complete_left",
    "complete_right",
    "invert_slashes",
    "wrap",
    # Substring access
    "get_left",
    "get_right",
    "remove_left",
    "remove_right",
    "compare_left",
    "compare_right",
    "get_position",
    "remove_position",
    "exist_substring",
    # URL helpers
    "get_site_address",
    "get_url_params",
    "add_http",
    "extract_youtube_id",
    # Character-class filters
    "keep_only_numbers",
    "keep_only_letters",
    "keep_only_letters_and_spaces",
    "keep_only_numbers_and_letters",
    "keep_only_numbers_letters_and_spaces",
    "has_only_numbers",
    "has_int",
    "is_aliquot",
    # Splitting/joining/lines
    "to_array",
    "remove_bbcode",
    "to_index",
    "get_first_line",
    "remove_lines",
    "to_line",
    "get_lines",
    # Encoding
    "base64_safe_encode",
    "base64_safe_decode",
    "get_random_chars",
    # Transliteration
    "translit_to_rus",
    "translit_to_eng",
    "LATIN_TO_CYRILLIC",
    "CYRILLIC_TO_LATIN",
    # Exceptions
    "StrToolsError",
    "ConfigError",
    "ValidationError",
]
