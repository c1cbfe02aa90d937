"""
test_resolver.py — Tests for turning URLs / bare IDs into video IDs.

No network access: resolution is pure string matching.
"""

from __future__ import annotations

import pytest

from yt_transcript_downloader.errors import InvalidUrlError
from yt_transcript_downloader.resolver import resolve_video_id

VIDEO_ID = "dQw4w9WgXcQ"


class TestResolveVideoId:
    """Every supported URL shape carrying the same ID yields that ID."""

    @pytest.mark.parametrize("url", [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=120",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=120&list=PLrAXtmErZgOeiKm4sgNOknGvNjby9efdf",
        "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "https://m.youtube.com/watch?app=desktop&v=dQw4w9WgXcQ#t=30",
        "http://youtube.com/watch?v=dQw4w9WgXcQ",
        "youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?si=abcdef&t=5",
        "https://youtu.be/dQw4w9WgXcQ/",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/embed/dQw4w9WgXcQ?start=10&autoplay=1",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
        "dQw4w9WgXcQ",
        "  dQw4w9WgXcQ  ",
    ])
    def test_url_shapes(self, url: str) -> None:
        assert resolve_video_id(url) == VIDEO_ID

    def test_watch_url_with_time_suffix(self) -> None:
        """The `&t=120` suffix is never part of the ID."""
        assert resolve_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=120") == "dQw4w9WgXcQ"

    def test_query_form_beats_trailing_path_segment(self) -> None:
        """When both a `v` parameter and an 11-char last segment exist, `v` wins."""
        url = "https://www.youtube.com/abcdefghijk/watch?v=dQw4w9WgXcQ"
        assert resolve_video_id(url) == VIDEO_ID

    def test_id_with_hyphens_and_underscores(self) -> None:
        assert resolve_video_id("https://youtu.be/abc123DEF_-") == "abc123DEF_-"

    def test_overlong_v_parameter_is_truncated(self) -> None:
        assert resolve_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQextra") == VIDEO_ID

    @pytest.mark.parametrize("value", [
        "",
        "   ",
        "not-a-youtube-url",
        "dQw4w9WgXc",
        "dQw4w9WgXcQQ",
        "https://www.youtube.com/watch?v=short",
        "https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw",
        "https://youtu.be/",
        "dQw4w9WgX!Q",
    ])
    def test_unrecognized_input_raises(self, value: str) -> None:
        with pytest.raises(InvalidUrlError):
            resolve_video_id(value)

    def test_error_carries_input_and_status(self) -> None:
        with pytest.raises(InvalidUrlError) as excinfo:
            resolve_video_id("nope")
        assert excinfo.value.value == "nope"
        assert excinfo.value.http_status == 400
        assert "nope" in excinfo.value.message
