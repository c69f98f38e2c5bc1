#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/strtools/constants.py
"""Constants and default values for the strtools helpers.

This module centralizes the character classes, compiled patterns, numeric
limits and default arguments shared by the string helper modules.

Constants are organized by category:
1. Defaults - Default arguments of the public helpers
2. Character Classes - Patterns used by filters and whitespace handling
3. Numeric Limits - Ranges used by integer checks and random generation
4. Configuration - Settings discovery names and environment variables
"""

from __future__ import annotations

import re

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_PAD_SYMBOL = "0"
DEFAULT_SPLIT_DELIMITER = " "
DEFAULT_LINE_SEPARATOR = " "
DEFAULT_LINE_COUNT = 1
DEFAULT_RANDOM_LENGTH = 1

HTTP_PREFIX = "http://"
HTTPS_PREFIX = "https://"

YOUTUBE_HOST = "youtube.com"
YOUTUBE_SHORT_HOST = "youtu.be"
YOUTUBE_VIDEO_PARAM = "v"

# =============================================================================
# Character Classes
# =============================================================================

# Runs of two or more ASCII whitespace characters
MULTI_SPACE_PATTERN = re.compile(r"\s{2,}", re.ASCII)

# Characters removed from both ends before splitting on a single space
TRIM_CHARS = " \t\n\r\0\x0b"

# Latin and basic Cyrillic letters; ё/Ё sit outside the а-я range and are not included
LETTERS_CLASS = "a-zA-Zа-яА-Я"
DIGITS_CLASS = "0-9"

NON_DIGIT_PATTERN = re.compile(rf"[^{DIGITS_CLASS}]")
NON_LETTER_PATTERN = re.compile(rf"[^{LETTERS_CLASS}]+")
NON_LETTER_SPACE_PATTERN = re.compile(rf"[^{LETTERS_CLASS}\s]+")
NON_ALNUM_PATTERN = re.compile(rf"[^{LETTERS_CLASS}{DIGITS_CLASS}]+")
NON_ALNUM_SPACE_PATTERN = re.compile(rf"[^{LETTERS_CLASS}{DIGITS_CLASS}\s]+")

DIGITS_ONLY_PATTERN = re.compile(r"[0-9]+")
CANONICAL_INT_PATTERN = re.compile(r"-?[1-9][0-9]*|0")

# Non-greedy [tag] matcher, nested brackets are not supported
BBCODE_PATTERN = re.compile(r"[\[/!]*?[^\[\]]*?\]", re.DOTALL | re.IGNORECASE)

INDEX_DISALLOWED_PATTERN = re.compile(r"[^0-9A-Za-z_]")

BASE64_ALPHABET_PATTERN = re.compile(r"[^A-Za-z0-9+/]")

# =============================================================================
# Numeric Limits
# =============================================================================

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Printable ASCII range used by get_random_chars (inclusive)
RANDOM_CHAR_MIN = 32
RANDOM_CHAR_MAX = 126

# =============================================================================
# Configuration
# =============================================================================

ENV_PREFIX = "STRTOOLS_"
ENV_CONFIG_PATH = "STRTOOLS_CONFIG"

CONFIG_FILENAMES = (".strtools.toml", ".strtools.yaml", ".strtools.yml", ".strtools.json")
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_SECTION = "strtools"

DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")
