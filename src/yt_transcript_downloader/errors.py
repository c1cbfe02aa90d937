"""
errors.py — Custom exception hierarchy for youtube-transcript-downloader.

Every exception carries an `http_status` attribute so the FastAPI error
handler can translate library-level errors directly into the correct HTTP
response code without a separate mapping table.  The CLI only uses the
`message` attribute and exits with status 1.

Hierarchy:
    TranscriptError (base, 500)
    ├── InvalidUrlError (400)
    ├── VideoUnavailableError (404)
    ├── NoCaptionsError (404)
    ├── LanguageNotFoundError (404)
    ├── FetchError (502)
    └── ParseError (502)
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class TranscriptError(Exception):
    """
    Root exception for all transcript-related errors.

    Attributes:
        message:     Human-readable description of what went wrong.
        http_status: Suggested HTTP status code for the API layer.
    """

    def __init__(self, message: str, http_status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status


# ---------------------------------------------------------------------------
# Specific error cases
# ---------------------------------------------------------------------------

class InvalidUrlError(TranscriptError):
    """
    Raised when no 11-character video ID can be derived from the input.

    Maps to HTTP 400: the caller sent something that isn't a YouTube reference.
    """

    def __init__(self, value: str) -> None:
        super().__init__(
            message=f"Invalid YouTube URL or video ID: {value!r}",
            http_status=400,
        )
        self.value = value


class VideoUnavailableError(TranscriptError):
    """
    Raised when the video page cannot be retrieved.

    Possible causes: the video was deleted, is private, or the ID is unknown.
    Maps to HTTP 404.
    """

    def __init__(self, video_id: str, reason: str = "") -> None:
        detail = f" ({reason})" if reason else ""
        super().__init__(
            message=f"Video unavailable: {video_id}{detail}",
            http_status=404,
        )
        self.video_id = video_id


class NoCaptionsError(TranscriptError):
    """
    Raised when the video exposes zero caption tracks.

    Happens when the creator disabled captions and YouTube hasn't generated
    automatic ones.  Maps to HTTP 404.
    """

    def __init__(self, video_id: str | None = None) -> None:
        target = f" for video: {video_id}" if video_id else ""
        super().__init__(
            message=f"No captions available{target}",
            http_status=404,
        )
        self.video_id = video_id


class LanguageNotFoundError(TranscriptError):
    """
    Raised when a specific language was requested but no track matches it.

    Attributes:
        requested: The language code the caller asked for.
        available: Language codes the video does offer, in catalog order.
    """

    def __init__(self, requested: str, available: list[str]) -> None:
        offered = ", ".join(available) if available else "none"
        super().__init__(
            message=f"Language '{requested}' not available (available: {offered})",
            http_status=404,
        )
        self.requested = requested
        self.available = available


class FetchError(TranscriptError):
    """
    Raised on network or protocol failure while talking to YouTube.

    Also covers caption manifests that could be downloaded but not
    understood, so callers can tell "no captions" apart from "captions could
    not be read".  Maps to HTTP 502 because the failure is upstream.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message=message, http_status=502)


class ParseError(TranscriptError):
    """
    Raised when a timed-text payload cannot be decoded into transcript lines.

    Maps to HTTP 502: the upstream service returned data we can't use.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message=message, http_status=502)
