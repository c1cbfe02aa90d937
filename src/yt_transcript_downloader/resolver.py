"""
resolver.py — Turn a YouTube URL (or bare ID) into a canonical video ID.

Supported shapes, tried in this order:

    1. Bare ID         dQw4w9WgXcQ
    2. Watch query     https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ&t=120
    3. Short link      https://youtu.be/dQw4w9WgXcQ?si=abc
    4. Embed path      https://www.youtube.com/embed/dQw4w9WgXcQ  (also shorts/, v/, live/)

Each matcher returns the ID or None; the first hit wins.  Nothing here touches
the network.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from yt_transcript_downloader.errors import InvalidUrlError

_ID_CHARS = r"[A-Za-z0-9_-]"

# A bare video ID is exactly 11 characters from the base64url alphabet.
_BARE_ID_PATTERN = re.compile(rf"^{_ID_CHARS}{{11}}$")

# "v" may appear anywhere in the query string; anything after the 11th
# character (e.g. "&t=120") is not part of the ID.
_WATCH_QUERY_PATTERN = re.compile(
    rf"watch/?\?(?:[^#\s]*?&)?v=(?P<id>{_ID_CHARS}{{11}})"
)

_EMBED_PATTERN = re.compile(
    rf"/(?:embed|shorts|v|live)/(?P<id>{_ID_CHARS}{{11}})(?=$|[/?&#])"
)

Matcher = Callable[[str], Optional[str]]


def _match_bare_id(text: str) -> str | None:
    return text if _BARE_ID_PATTERN.match(text) else None


def _match_watch_query(text: str) -> str | None:
    match = _WATCH_QUERY_PATTERN.search(text)
    return match.group("id") if match else None


def _match_short_link(text: str) -> str | None:
    # Drop the query string and fragment, then look at the last path segment.
    path = re.split(r"[?&#]", text, maxsplit=1)[0].rstrip("/")
    if "/" not in path:
        return None
    segment = path.rsplit("/", 1)[1]
    return segment if _BARE_ID_PATTERN.match(segment) else None


def _match_embed(text: str) -> str | None:
    match = _EMBED_PATTERN.search(text)
    return match.group("id") if match else None


# Priority order matters: the query form must beat the trailing-path form.
_MATCHERS: tuple[Matcher, ...] = (
    _match_bare_id,
    _match_watch_query,
    _match_short_link,
    _match_embed,
)


def resolve_video_id(url_or_id: str) -> str:
    """
    Extract a YouTube video ID from a URL string, or validate a raw 11-char ID.

    Args:
        url_or_id: A YouTube URL or a raw video ID.  Surrounding whitespace is
                   ignored.

    Returns:
        The 11-character video ID.

    Raises:
        InvalidUrlError: If the string doesn't match any known shape.
    """
    text = url_or_id.strip()

    for matcher in _MATCHERS:
        video_id = matcher(text)
        if video_id is not None:
            return video_id

    raise InvalidUrlError(url_or_id)
