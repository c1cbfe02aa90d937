"""
fetcher.py — Download a caption track and normalize it into TranscriptLines.

The track's locator (a youtube-transcript-api Transcript) knows the timed-text
URL and performs the request.  This module owns what comes back: every cue is
checked for usable timing and its text is cleaned of HTML entities and markup.
Cue order is passed through untouched, even when it isn't sorted by start.
"""

from __future__ import annotations

import html
import logging
import math
import re
from typing import Any
from xml.etree.ElementTree import ParseError as XmlParseError

import requests
import youtube_transcript_api as yta_errors

from yt_transcript_downloader.errors import FetchError, ParseError
from yt_transcript_downloader.models import CaptionTrack, TranscriptLine

logger = logging.getLogger(__name__)

# Only things that look like real tags (<i>, </font>, <c.colorE5E5E5>) are
# removed, so a literal "a < b" in a caption survives.
_TAG_PATTERN = re.compile(r"</?[A-Za-z][^<>]*>")


def clean_text(raw: str) -> str:
    """
    Decode HTML entities and strip markup tags from a caption cue.

    Entities are decoded a second time after tag removal because YouTube
    sometimes double-encodes them (e.g. "&amp;#39;" for an apostrophe).
    """
    text = html.unescape(raw)
    text = _TAG_PATTERN.sub("", text)
    text = html.unescape(text)
    return text.strip()


def _parse_seconds(value: Any, field: str, index: int) -> float:
    try:
        seconds = float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Cue {index}: {field} is not a number: {value!r}") from exc
    if not math.isfinite(seconds) or seconds < 0:
        raise ParseError(f"Cue {index}: {field} must be a non-negative number, got {value!r}")
    return seconds


def parse_cues(cues: Any) -> list[TranscriptLine]:
    """
    Convert raw cues into TranscriptLines.

    Args:
        cues: An iterable of objects with .text, .start and .duration
              attributes (FetchedTranscriptSnippet) or dicts with the same
              keys (FetchedTranscript.to_raw_data()).

    Returns:
        One TranscriptLine per cue, in the order given.

    Raises:
        ParseError: A cue is missing a field or carries unusable timing.
    """
    lines: list[TranscriptLine] = []
    for index, cue in enumerate(cues):
        if isinstance(cue, dict):
            raw_text, start, duration = cue.get("text"), cue.get("start"), cue.get("duration")
        else:
            raw_text = getattr(cue, "text", None)
            start = getattr(cue, "start", None)
            duration = getattr(cue, "duration", None)

        if raw_text is None:
            raise ParseError(f"Cue {index} has no text")

        lines.append(
            TranscriptLine(
                text=clean_text(str(raw_text)),
                start=_parse_seconds(start, "start", index),
                duration=_parse_seconds(duration, "duration", index),
            )
        )
    return lines


def fetch_transcript(track: CaptionTrack) -> list[TranscriptLine]:
    """
    Retrieve and parse the timed-text payload for a caption track.

    Args:
        track: A CaptionTrack produced by list_tracks().

    Returns:
        The transcript as an ordered list of TranscriptLine.

    Raises:
        FetchError: Network/protocol failure, or a track without a locator.
        ParseError: The payload is not well-formed timed text.
    """
    if track.locator is None:
        raise FetchError(f"Caption track '{track.language_code}' has no download locator")

    logger.debug("Fetching %s captions (%s)", track.language_code, track.language_name)

    try:
        fetched = track.locator.fetch()
        cues = list(fetched)
    except XmlParseError as exc:
        raise ParseError(f"Malformed timed-text payload for '{track.language_code}': {exc}") from exc
    except yta_errors.CouldNotRetrieveTranscript as exc:
        raise FetchError(
            f"Failed to download '{track.language_code}' captions ({type(exc).__name__})"
        ) from exc
    except requests.RequestException as exc:
        raise FetchError(f"Network error while downloading '{track.language_code}' captions: {exc}") from exc
    except ValueError as exc:
        # defusedxml rejects hostile documents with ValueError subclasses.
        raise ParseError(f"Unreadable timed-text payload for '{track.language_code}': {exc}") from exc

    lines = parse_cues(cues)
    logger.info("Fetched %d lines of %s captions", len(lines), track.language_code)
    return lines
