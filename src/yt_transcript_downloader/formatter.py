"""
formatter.py — Render transcript lines as txt, srt or json.

All functions are pure.  An empty transcript is valid input: txt and srt give
an empty string, json gives "[]".
"""

from __future__ import annotations

import json
import math
from typing import Callable, Sequence

from yt_transcript_downloader.models import OutputFormat, TranscriptLine


def _coerce_format(fmt: OutputFormat | str) -> OutputFormat:
    if isinstance(fmt, OutputFormat):
        return fmt
    try:
        return OutputFormat(str(fmt).lower())
    except ValueError:
        raise ValueError(
            f"Unknown format {fmt!r}; expected one of: {', '.join(OutputFormat.choices())}"
        ) from None


def format_simple_timestamp(seconds: float) -> str:
    """
    Convert seconds to "[MM:SS]", truncating to whole seconds.

    Minutes are not wrapped at 60, so 3661.5 becomes "[61:01]".
    """
    total = int(seconds)
    mins, secs = divmod(total, 60)
    return f"[{mins:02d}:{secs:02d}]"


def format_srt_timestamp(seconds: float) -> str:
    """
    Convert seconds to "HH:MM:SS,mmm".

    Milliseconds are the fractional remainder rounded half-up; a remainder
    that rounds to 1000 carries into the seconds.
    """
    whole = int(seconds)
    millis = math.floor((seconds - whole) * 1000 + 0.5)
    if millis >= 1000:
        whole += 1
        millis -= 1000
    hours, rest = divmod(whole, 3600)
    mins, secs = divmod(rest, 60)
    return f"{hours:02d}:{mins:02d}:{secs:02d},{millis:03d}"


def format_txt(lines: Sequence[TranscriptLine], timestamps: bool = False) -> str:
    """One line per cue, joined by newlines, no trailing newline."""
    if timestamps:
        return "\n".join(f"{format_simple_timestamp(line.start)} {line.text}" for line in lines)
    return "\n".join(line.text for line in lines)


def format_srt(lines: Sequence[TranscriptLine]) -> str:
    """
    SubRip blocks separated by one blank line.

    Example:
        1
        00:00:01,360 --> 00:00:03,040
        Hello world

        2
        00:00:03,040 --> 00:00:05,040
        This is a test
    """
    blocks = []
    for index, line in enumerate(lines, start=1):
        start = format_srt_timestamp(line.start)
        end = format_srt_timestamp(line.start + line.duration)
        blocks.append(f"{index}\n{start} --> {end}\n{line.text}\n")
    return "\n".join(blocks)


def format_json(lines: Sequence[TranscriptLine]) -> str:
    """An array of {text, start, duration} objects with 2-space indentation."""
    return json.dumps([line.to_dict() for line in lines], indent=2, ensure_ascii=False)


_RENDERERS: dict[OutputFormat, Callable[[Sequence[TranscriptLine], bool], str]] = {
    OutputFormat.TXT: format_txt,
    OutputFormat.SRT: lambda lines, _timestamps: format_srt(lines),
    OutputFormat.JSON: lambda lines, _timestamps: format_json(lines),
}


def format_transcript(
    lines: Sequence[TranscriptLine],
    fmt: OutputFormat | str,
    timestamps: bool = False,
) -> str:
    """
    Format transcript lines in the requested encoding.

    Args:
        lines:      Transcript lines in playback order.
        fmt:        An OutputFormat or its name ("txt", "srt", "json").
        timestamps: Prefix [MM:SS] markers.  Only affects txt.

    Returns:
        The formatted document.

    Raises:
        ValueError: If `fmt` is not one of the known formats.
    """
    return _RENDERERS[_coerce_format(fmt)](lines, timestamps)


def get_extension(fmt: OutputFormat | str) -> str:
    """File extension for a format; identical to the format name."""
    return _coerce_format(fmt).value
