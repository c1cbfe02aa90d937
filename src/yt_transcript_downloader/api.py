"""
api.py — FastAPI REST API for youtube-transcript-downloader.

Endpoints:
    GET /transcript/{video_id}   — Download a transcript as txt, srt or json.
    GET /languages/{video_id}    — List the caption tracks a video offers.
    GET /health                  — Simple health-check for load balancers / monitoring.

Run with:
    uvicorn yt_transcript_downloader.api:app

The global exception handler catches any TranscriptError and converts it to
the appropriate HTTP response using the status code stored on the exception.
Endpoints are plain `def` functions because the pipeline blocks on network
I/O; FastAPI runs them in its threadpool.
"""

from __future__ import annotations

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response

from yt_transcript_downloader import __version__
from yt_transcript_downloader.errors import TranscriptError
from yt_transcript_downloader.extractor import download, list_languages
from yt_transcript_downloader.models import OutputFormat

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MEDIA_TYPES = {
    OutputFormat.TXT: "text/plain",
    OutputFormat.SRT: "application/x-subrip",
    OutputFormat.JSON: "application/json",
}

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(
    title="YouTube Transcript Downloader API",
    description="Download YouTube video transcripts as plain text, SRT subtitles or JSON.",
    version=__version__,
)


# ---------------------------------------------------------------------------
# Global error handler
# ---------------------------------------------------------------------------

@app.exception_handler(TranscriptError)
async def transcript_error_handler(request: Request, exc: TranscriptError) -> JSONResponse:
    """Translate any TranscriptError (or subclass) into an HTTP error response."""
    return JSONResponse(
        status_code=exc.http_status,
        content={"error": exc.message},
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/transcript/{video_id}", response_model=None)
def get_transcript(
    video_id: str,
    format: str = Query(
        default="txt",
        description="Output format: 'txt', 'srt' or 'json'.",
        pattern="^(txt|srt|json)$",
    ),
    lang: str = Query(
        default="",
        description="Language code (e.g. 'ja').  Empty picks the first manual track.",
    ),
    timestamps: bool = Query(
        default=False,
        description="Prefix [MM:SS] markers to each line (txt only).",
    ),
) -> Response:
    """
    Download the transcript for a single YouTube video.

    **video_id** is the 11-character YouTube video identifier
    (e.g. `dQw4w9WgXcQ`).  The body is the formatted document exactly as the
    CLI would write it to disk.
    """
    fmt = OutputFormat(format)
    result = download(video_id, lang=lang or None, fmt=fmt, timestamps=timestamps)
    return Response(content=result.content, media_type=_MEDIA_TYPES[fmt])


@app.get("/languages/{video_id}")
def get_languages(video_id: str) -> JSONResponse:
    """
    List the caption tracks available for a video.

    `default` marks the track used when no language is requested.
    """
    resolved_id, catalog, default = list_languages(video_id)
    return JSONResponse(content={
        "video_id": resolved_id,
        "tracks": [
            {
                "language_code": track.language_code,
                "language_name": track.language_name,
                "is_generated": track.is_generated,
                "default": track is default,
            }
            for track in catalog
        ],
    })


@app.get("/health")
async def health() -> dict:
    """Health-check endpoint.  Returns 200 with {"status": "ok"}."""
    return {"status": "ok"}
