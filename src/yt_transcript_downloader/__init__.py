"""
yt_transcript_downloader — Download YouTube video transcripts.

Public API:
    download()            High-level one-call interface (URL → formatted output).
    list_languages()      Resolve a video and list its caption tracks.
    resolve_video_id()    Parse a YouTube URL or validate a bare video ID.
    list_tracks()         Fetch the caption catalog for a video ID.
    select_track()        Pick a track by language, with manual-first fallback.
    fetch_transcript()    Download and parse one caption track.
    format_transcript()   Render lines as txt, srt or json.
    get_extension()       File extension for an output format.

Exception hierarchy (all importable from this package):
    TranscriptError              Base exception for all transcript errors.
    ├── InvalidUrlError          No video ID could be derived from the input.
    ├── VideoUnavailableError    Video doesn't exist, is private or deleted.
    ├── NoCaptionsError          Video has no caption tracks.
    ├── LanguageNotFoundError    Requested language not available.
    ├── FetchError               Network or protocol failure.
    └── ParseError               Timed-text payload could not be decoded.

Usage:
    from yt_transcript_downloader import download
    result = download("https://www.youtube.com/watch?v=dQw4w9WgXcQ", fmt="srt")
    print(result.content)
"""

__version__ = "1.0.0"

from yt_transcript_downloader.catalog import build_api, list_tracks
from yt_transcript_downloader.errors import (
    FetchError,
    InvalidUrlError,
    LanguageNotFoundError,
    NoCaptionsError,
    ParseError,
    TranscriptError,
    VideoUnavailableError,
)
from yt_transcript_downloader.extractor import DownloadResult, download, list_languages
from yt_transcript_downloader.fetcher import fetch_transcript
from yt_transcript_downloader.formatter import format_transcript, get_extension
from yt_transcript_downloader.models import CaptionTrack, OutputFormat, TranscriptLine
from yt_transcript_downloader.resolver import resolve_video_id
from yt_transcript_downloader.selector import select_track

__all__ = [
    "download",
    "list_languages",
    "DownloadResult",
    "build_api",
    "resolve_video_id",
    "list_tracks",
    "select_track",
    "fetch_transcript",
    "format_transcript",
    "get_extension",
    "CaptionTrack",
    "TranscriptLine",
    "OutputFormat",
    "TranscriptError",
    "InvalidUrlError",
    "VideoUnavailableError",
    "NoCaptionsError",
    "LanguageNotFoundError",
    "FetchError",
    "ParseError",
]
