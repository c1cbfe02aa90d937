"""
models.py — Value types shared by every stage of the pipeline.

Everything here is created fresh per invocation and held only in memory.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class OutputFormat(enum.Enum):
    """The closed set of output encodings.  The value doubles as file extension."""

    TXT = "txt"
    SRT = "srt"
    JSON = "json"

    @classmethod
    def choices(cls) -> list[str]:
        """Format names in declaration order, e.g. for CLI help text."""
        return [member.value for member in cls]


@dataclass(frozen=True)
class CaptionTrack:
    """
    One language/variant of captions offered for a video.

    Attributes:
        language_code: Code as listed by YouTube (e.g. "en", "pt-BR").
        language_name: Display name (e.g. "English (auto-generated)").
        is_generated:  True for automatic speech-recognition tracks.
        locator:       Opaque handle the fetcher uses to download the
                       payload.  Not part of equality or repr.
    """
    language_code: str
    language_name: str
    is_generated: bool
    locator: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class TranscriptLine:
    """
    A single timed caption cue.

    `start` and `duration` are seconds with full sub-second precision.  Cues
    may overlap; nothing downstream may assume disjoint intervals.
    """
    text: str
    start: float
    duration: float

    def to_dict(self) -> dict:
        return {"text": self.text, "start": self.start, "duration": self.duration}
