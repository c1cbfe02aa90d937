"""
conftest.py — Shared fakes for the transcript-api objects.

The real Transcript / FetchedTranscriptSnippet classes are never constructed
in unit tests; these stand-ins expose the same attributes the package reads.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from yt_transcript_downloader.models import CaptionTrack, TranscriptLine


class FakeSnippet:
    """Mimics FetchedTranscriptSnippet with .text, .start, .duration."""

    def __init__(self, text, start, duration) -> None:
        self.text = text
        self.start = start
        self.duration = duration


class FakeTranscript:
    """Mimics youtube_transcript_api.Transcript: language attrs plus fetch()."""

    def __init__(
        self,
        language_code: str,
        language: str = "",
        is_generated: bool = False,
        snippets: list[dict] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.language_code = language_code
        self.language = language or language_code
        self.is_generated = is_generated
        self._snippets = snippets or []
        self._error = error
        self.fetch_calls = 0

    def fetch(self, preserve_formatting: bool = False) -> list[FakeSnippet]:
        self.fetch_calls += 1
        if self._error is not None:
            raise self._error
        return [FakeSnippet(**s) for s in self._snippets]


def make_api(transcripts: list[FakeTranscript] | None = None, error: Exception | None = None) -> MagicMock:
    """Build a mock YouTubeTranscriptApi whose list() returns `transcripts`."""
    api = MagicMock()
    if error is not None:
        api.list.side_effect = error
    else:
        api.list.return_value = transcripts or []
    return api


SAMPLE_LINES = [
    TranscriptLine(text="Hello world", start=1.36, duration=1.68),
    TranscriptLine(text="This is a test", start=3.04, duration=2.0),
    TranscriptLine(text="Goodbye", start=5.04, duration=1.5),
]


@pytest.fixture()
def sample_lines() -> list[TranscriptLine]:
    return list(SAMPLE_LINES)


@pytest.fixture()
def mixed_catalog() -> list[CaptionTrack]:
    """Two manual tracks followed by two auto-generated ones."""
    return [
        CaptionTrack("en", "English", False),
        CaptionTrack("de", "German", False),
        CaptionTrack("ja", "Japanese (auto-generated)", True),
        CaptionTrack("ko", "Korean (auto-generated)", True),
    ]
