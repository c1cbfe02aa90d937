"""
catalog.py — Discover the caption tracks a video offers.

The watch page, its embedded caption manifest and the innertube handshake are
handled by `youtube-transcript-api`; this module turns the library's
TranscriptList into our own CaptionTrack records and maps its exceptions onto
our error hierarchy.
"""

from __future__ import annotations

import logging

import requests
import youtube_transcript_api as yta_errors  # exception classes live here
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.proxies import GenericProxyConfig

from yt_transcript_downloader.errors import (
    FetchError,
    NoCaptionsError,
    VideoUnavailableError,
)
from yt_transcript_downloader.models import CaptionTrack

logger = logging.getLogger(__name__)


def build_api(
    proxy: str | None = None,
    http_client: requests.Session | None = None,
) -> YouTubeTranscriptApi:
    """
    Construct a transcript-api client.

    Args:
        proxy:       Optional proxy URL used for both http and https traffic.
        http_client: Optional pre-configured requests.Session (headers,
                     cookies, adapters).  A fresh session is used otherwise.

    Returns:
        A YouTubeTranscriptApi instance.  Build one per invocation; the
        session inside it is the only state it carries.
    """
    proxy_config = None
    if proxy:
        proxy_config = GenericProxyConfig(http_url=proxy, https_url=proxy)
        logger.debug("Routing YouTube requests through proxy %s", proxy)
    return YouTubeTranscriptApi(proxy_config=proxy_config, http_client=http_client)


def list_tracks(
    video_id: str,
    api: YouTubeTranscriptApi | None = None,
) -> list[CaptionTrack]:
    """
    Fetch the ordered list of caption tracks for a video.

    Manually authored tracks come before auto-generated ones, as YouTube lists
    them.  When both kinds exist for the same language code, only the first
    (manual) one is kept so codes are unique within the catalog.

    Args:
        video_id: The 11-character YouTube video ID (NOT a full URL).
        api:      Optional client from build_api(); a default one is built
                  when omitted.

    Returns:
        A non-empty list of CaptionTrack.

    Raises:
        VideoUnavailableError: The video is missing, private or deleted.
        NoCaptionsError:       The video exposes no caption tracks.
        FetchError:            Network failure, non-2xx response, or a
                               manifest that could not be understood.
    """
    api = api or build_api()
    logger.debug("Listing caption tracks for %s", video_id)

    try:
        transcript_list = api.list(video_id)
        entries = list(transcript_list)

    # --- Map upstream exceptions to our own hierarchy ---
    except yta_errors.TranscriptsDisabled as exc:
        raise NoCaptionsError(video_id) from exc
    except (yta_errors.InvalidVideoId, yta_errors.VideoUnavailable) as exc:
        raise VideoUnavailableError(video_id) from exc
    except yta_errors.VideoUnplayable as exc:
        raise VideoUnavailableError(video_id, reason="video is unplayable") from exc
    except yta_errors.CouldNotRetrieveTranscript as exc:
        raise FetchError(
            f"Failed to list captions for video {video_id} ({type(exc).__name__})"
        ) from exc
    except requests.RequestException as exc:
        raise FetchError(f"Network error while listing captions for {video_id}: {exc}") from exc
    except (KeyError, TypeError, ValueError) as exc:
        raise FetchError(f"Malformed caption manifest for video {video_id}") from exc

    tracks: list[CaptionTrack] = []
    seen: set[str] = set()
    for entry in entries:
        code = getattr(entry, "language_code", None)
        if not code:
            raise FetchError(f"Malformed caption manifest for video {video_id}: track without language code")

        key = code.lower()
        if key in seen:
            logger.debug("Skipping duplicate %s track for %s", code, video_id)
            continue
        seen.add(key)

        tracks.append(
            CaptionTrack(
                language_code=code,
                language_name=getattr(entry, "language", None) or code,
                is_generated=bool(getattr(entry, "is_generated", False)),
                locator=entry,
            )
        )

    if not tracks:
        raise NoCaptionsError(video_id)

    logger.info("Found %d caption track(s) for %s", len(tracks), video_id)
    return tracks
