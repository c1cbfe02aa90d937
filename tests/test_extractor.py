"""
test_extractor.py — Tests for the end-to-end pipeline.

Unit tests (fast, no network) feed a mocked transcript-api client through
every stage.  Integration tests (need network, marked with
@pytest.mark.integration) hit YouTube for real.
"""

from __future__ import annotations

import json

import pytest

from conftest import FakeTranscript, make_api
from yt_transcript_downloader.errors import (
    InvalidUrlError,
    LanguageNotFoundError,
    NoCaptionsError,
)
from yt_transcript_downloader.extractor import download, list_languages

_SNIPPETS = [
    {"text": "Hello world", "start": 1.36, "duration": 1.68},
    {"text": "Goodbye", "start": 3.04, "duration": 2.0},
]


def _catalog_api() -> tuple:
    english_auto = FakeTranscript("en", "English (auto-generated)", is_generated=True, snippets=_SNIPPETS)
    german = FakeTranscript("de", "German", snippets=[{"text": "Hallo Welt", "start": 0.0, "duration": 1.0}])
    return make_api([german, english_auto]), german, english_auto


class TestDownload:

    def test_default_track_and_txt(self) -> None:
        api, german, english_auto = _catalog_api()

        result = download("https://youtu.be/dQw4w9WgXcQ", api=api)

        api.list.assert_called_once_with("dQw4w9WgXcQ")
        assert result.video_id == "dQw4w9WgXcQ"
        assert result.track.language_code == "de"
        assert result.content == "Hallo Welt"
        assert result.extension == "txt"
        assert result.default_filename == "dQw4w9WgXcQ.txt"
        assert german.fetch_calls == 1
        assert english_auto.fetch_calls == 0

    def test_requested_language_with_timestamps(self) -> None:
        api, _, _ = _catalog_api()

        result = download("dQw4w9WgXcQ", lang="EN", fmt="txt", timestamps=True, api=api)

        assert result.track.is_generated is True
        assert result.content == "[00:01] Hello world\n[00:03] Goodbye"
        assert len(result.lines) == 2

    def test_json_output(self) -> None:
        api, _, _ = _catalog_api()

        result = download("dQw4w9WgXcQ", lang="en", fmt="json", api=api)

        assert json.loads(result.content) == _SNIPPETS
        assert result.default_filename == "dQw4w9WgXcQ.json"

    def test_unknown_format_fails_before_network(self) -> None:
        api, _, _ = _catalog_api()
        with pytest.raises(ValueError):
            download("dQw4w9WgXcQ", fmt="docx", api=api)
        api.list.assert_not_called()

    def test_invalid_url_fails_before_network(self) -> None:
        api, _, _ = _catalog_api()
        with pytest.raises(InvalidUrlError):
            download("https://example.com/", api=api)
        api.list.assert_not_called()

    def test_missing_language_does_not_fetch(self) -> None:
        api, german, english_auto = _catalog_api()
        with pytest.raises(LanguageNotFoundError):
            download("dQw4w9WgXcQ", lang="ja", api=api)
        assert german.fetch_calls == 0
        assert english_auto.fetch_calls == 0

    def test_no_captions(self) -> None:
        with pytest.raises(NoCaptionsError):
            download("dQw4w9WgXcQ", api=make_api([]))


class TestListLanguages:

    def test_returns_catalog_and_default(self) -> None:
        api, _, _ = _catalog_api()

        video_id, catalog, default = list_languages(
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=120", api=api,
        )

        assert video_id == "dQw4w9WgXcQ"
        assert [t.language_code for t in catalog] == ["de", "en"]
        assert default is catalog[0]


# ---------------------------------------------------------------------------
# Integration tests — require network access
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestIntegration:
    """
    Integration tests that hit YouTube's servers.

    Run with:  pytest -m integration
    """

    # "Never Gonna Give You Up" — one of the most stable videos on YouTube,
    # virtually guaranteed to have English captions.
    VIDEO_ID = "dQw4w9WgXcQ"

    def test_list_languages(self) -> None:
        video_id, catalog, default = list_languages(self.VIDEO_ID)
        assert video_id == self.VIDEO_ID
        assert any(t.language_code.startswith("en") for t in catalog)
        assert default in catalog

    def test_download_srt(self) -> None:
        result = download(self.VIDEO_ID, fmt="srt")
        assert result.content.startswith("1\n")
        assert " --> " in result.content
