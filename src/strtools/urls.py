#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/strtools/urls.py
"""Light URL helpers built on :mod:`urllib.parse`.

These helpers never raise on malformed URLs. A URL that cannot be split
is treated as having no host and no query.

Functions
---------
get_site_address : Host part of a URL
get_url_params : Query string as a flat dictionary
add_http : Ensure an http(s) scheme prefix
extract_youtube_id : Video id from youtube.com and youtu.be links

"""

from __future__ import annotations

import logging
from urllib.parse import SplitResult, parse_qsl, urlsplit

from strtools.constants import (
    HTTP_PREFIX,
    HTTPS_PREFIX,
    YOUTUBE_HOST,
    YOUTUBE_SHORT_HOST,
    YOUTUBE_VIDEO_PARAM,
)
from strtools.substrings import exist_substring

logger = logging.getLogger(__name__)


def _split_url(url: str) -> SplitResult | None:
    try:
        return urlsplit(url)
    except ValueError as e:
        logger.debug(f"Could not split URL {url!r}: {e}")
        return None


def _host_from_netloc(netloc: str) -> str:
    """Strip user info and port from a network location, keeping the host as written."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host.partition("]")[0] + "]"
    return host.partition(":")[0]


def get_site_address(url: str) -> str:
    """Return the host of ``url``.

    The host keeps the case it was written in. IPv6 literals keep their
    brackets.

    Parameters
    ----------
    url : str
        Absolute URL, e.g. ``https://user@example.com:8080/path``

    Returns
    -------
    str
        Host name without credentials or port, or an empty string when the
        URL has no network location

    Examples
    --------
        >>> get_site_address("https://Example.com/page?id=1")
        'Example.com'
        >>> get_site_address("example.com/page")
        ''

    """
    parts = _split_url(url)
    if parts is None:
        return ""
    return _host_from_netloc(parts.netloc)


def get_url_params(url: str) -> dict[str, str]:
    """Parse the query string of ``url`` into a dictionary.

    Blank values are kept and the last occurrence of a repeated key wins.

    Parameters
    ----------
    url : str
        URL with an optional query string

    Returns
    -------
    dict[str, str]
        Query parameters, empty when there is no query

    """
    parts = _split_url(url)
    if parts is None or not parts.query:
        return {}
    return dict(parse_qsl(parts.query, keep_blank_values=True))


def add_http(link: str) -> str:
    """Prefix ``link`` with ``http://`` unless it already has an http(s) scheme."""
    if not link.startswith(HTTP_PREFIX) and not link.startswith(HTTPS_PREFIX):
        link = HTTP_PREFIX + link
    return link


def extract_youtube_id(link: str) -> str:
    """Extract a YouTube video id from ``link``.

    ``youtube.com`` links carry the id in the ``v`` query parameter. For
    ``youtu.be`` short links the scheme, host and all slashes are removed
    and whatever remains is the id.

    Parameters
    ----------
    link : str
        YouTube watch or short link

    Returns
    -------
    str
        Video id, or an empty string for other links

    Examples
    --------
        >>> extract_youtube_id("https://www.youtube.com/watch?v=abc123")
        'abc123'
        >>> extract_youtube_id("https://youtu.be/abc123")
        'abc123'

    """
    if exist_substring(link, YOUTUBE_HOST):
        return get_url_params(link).get(YOUTUBE_VIDEO_PARAM, "")

    if exist_substring(link, YOUTUBE_SHORT_HOST):
        for token in (HTTP_PREFIX, HTTPS_PREFIX, YOUTUBE_SHORT_HOST, "/"):
            link = link.replace(token, "")
        return link

    return ""
