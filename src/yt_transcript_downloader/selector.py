"""
selector.py — Pick one caption track from a catalog.

Rules:
    - A requested language must match a track's code exactly, ignoring case.
      "en" does not match "en-GB"; there is no fuzzy matching.
    - Without a request, the first manually authored track wins; if every
      track is auto-generated, the first of those is used.
"""

from __future__ import annotations

from typing import Sequence

from yt_transcript_downloader.errors import LanguageNotFoundError, NoCaptionsError
from yt_transcript_downloader.models import CaptionTrack


def default_track(catalog: Sequence[CaptionTrack]) -> CaptionTrack:
    """Return the track used when no language is requested."""
    if not catalog:
        raise NoCaptionsError()
    for track in catalog:
        if not track.is_generated:
            return track
    return catalog[0]


def select_track(
    catalog: Sequence[CaptionTrack],
    requested: str | None = None,
) -> CaptionTrack:
    """
    Choose the caption track to download.

    Args:
        catalog:   Tracks in the order list_tracks() returned them.
        requested: Optional language code (e.g. "ja").  Empty string counts
                   as "not requested".

    Returns:
        The selected CaptionTrack.

    Raises:
        NoCaptionsError:       The catalog is empty.
        LanguageNotFoundError: `requested` was given and no track matches it.
    """
    if not catalog:
        raise NoCaptionsError()

    if not requested:
        return default_track(catalog)

    wanted = requested.strip().lower()
    for track in catalog:
        if track.language_code.lower() == wanted:
            return track

    raise LanguageNotFoundError(requested, [t.language_code for t in catalog])
