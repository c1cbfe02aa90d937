"""
extractor.py — The end-to-end pipeline.

Chains the stages in order, each one finishing before the next starts:

    resolve_video_id → list_tracks → select_track → fetch_transcript → format_transcript

Errors are never caught here; whatever a stage raises reaches the caller
unchanged, and nothing is returned for a failed run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from youtube_transcript_api import YouTubeTranscriptApi

from yt_transcript_downloader.catalog import list_tracks
from yt_transcript_downloader.fetcher import fetch_transcript
from yt_transcript_downloader.formatter import format_transcript, get_extension
from yt_transcript_downloader.models import CaptionTrack, OutputFormat, TranscriptLine
from yt_transcript_downloader.resolver import resolve_video_id
from yt_transcript_downloader.selector import default_track, select_track

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DownloadResult:
    """
    Everything produced by one download() call.

    Attributes:
        video_id:  The canonical 11-character ID.
        track:     The caption track that was downloaded.
        lines:     The parsed transcript.
        content:   The formatted document.
        extension: File extension matching the output format.
    """
    video_id: str
    track: CaptionTrack
    lines: list[TranscriptLine]
    content: str
    extension: str

    @property
    def default_filename(self) -> str:
        """Filename used when the caller names no output file."""
        return f"{self.video_id}.{self.extension}"


def list_languages(
    url_or_id: str,
    api: YouTubeTranscriptApi | None = None,
) -> tuple[str, list[CaptionTrack], CaptionTrack]:
    """
    Resolve the video and return its caption catalog.

    Returns:
        (video_id, catalog, track that would be picked without --lang)
    """
    video_id = resolve_video_id(url_or_id)
    catalog = list_tracks(video_id, api=api)
    return video_id, catalog, default_track(catalog)


def download(
    url_or_id: str,
    lang: str | None = None,
    fmt: OutputFormat | str = OutputFormat.TXT,
    timestamps: bool = False,
    *,
    api: YouTubeTranscriptApi | None = None,
) -> DownloadResult:
    """
    One-call interface: parse URL → pick a track → fetch → format.

    Args:
        url_or_id:  A YouTube URL or raw video ID.
        lang:       Optional language code; the default-track policy applies
                    when omitted.
        fmt:        Output format ("txt", "srt", "json" or an OutputFormat).
        timestamps: Prefix [MM:SS] markers (txt only).
        api:        Optional transcript-api client, e.g. one built with a
                    proxy via build_api().

    Returns:
        A DownloadResult.

    Raises:
        ValueError:      If fmt is not a known format.
        TranscriptError: (or subclass) on any extraction failure.
    """
    # Validate the format before any network traffic.
    extension = get_extension(fmt)

    video_id = resolve_video_id(url_or_id)
    catalog = list_tracks(video_id, api=api)
    track = select_track(catalog, lang)
    logger.info(
        "Selected %s track for %s%s",
        track.language_code,
        video_id,
        " (auto-generated)" if track.is_generated else "",
    )

    lines = fetch_transcript(track)
    content = format_transcript(lines, fmt, timestamps)

    return DownloadResult(
        video_id=video_id,
        track=track,
        lines=lines,
        content=content,
        extension=extension,
    )
