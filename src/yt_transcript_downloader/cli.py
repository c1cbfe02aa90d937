"""
cli.py — Command-line interface for youtube-transcript-downloader.

Provides the `youtube-transcript-downloader` command (registered as a console
script in pyproject.toml).

Usage examples:
    youtube-transcript-downloader https://www.youtube.com/watch?v=dQw4w9WgXcQ
    youtube-transcript-downloader dQw4w9WgXcQ -o output.txt
    youtube-transcript-downloader https://youtu.be/dQw4w9WgXcQ -l ja -f srt
    youtube-transcript-downloader https://www.youtube.com/watch?v=dQw4w9WgXcQ --list-langs

Every failure, including bad arguments, exits with status 1.
"""

from __future__ import annotations

import logging
import sys

import click

from yt_transcript_downloader import __version__
from yt_transcript_downloader.catalog import build_api
from yt_transcript_downloader.errors import TranscriptError
from yt_transcript_downloader.extractor import download, list_languages
from yt_transcript_downloader.models import CaptionTrack, OutputFormat


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PROG_NAME = "youtube-transcript-downloader"

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

class ArgumentError(click.UsageError):
    """Bad command-line arguments.  Exits with 1 like every other error."""

    exit_code = 1


class _DownloaderCommand(click.Command):
    """
    click.Command that reports parse failures with status 1.

    Unknown options are reported as "Unknown option: <flag>".
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except ArgumentError:
            raise
        except click.NoSuchOption as exc:
            raise ArgumentError(f"Unknown option: {exc.option_name}", ctx=ctx) from exc
        except click.UsageError as exc:
            raise ArgumentError(exc.format_message(), ctx=ctx) from exc


def _validate_format(ctx: click.Context, param: click.Parameter, value: str | None) -> OutputFormat:
    if value is None:
        return OutputFormat.TXT
    try:
        return OutputFormat(value.lower())
    except ValueError:
        raise ArgumentError(
            f"--format must be one of: {', '.join(OutputFormat.choices())}", ctx=ctx
        ) from None


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG with --verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def _print_catalog(video_id: str, catalog: list[CaptionTrack], default: CaptionTrack) -> None:
    click.echo(f"Video ID: {video_id}")
    click.echo()
    click.echo("Available captions:")
    for track in catalog:
        marker = "*" if track is default else " "
        # YouTube usually puts "(auto-generated)" in the name already.
        labelled = "auto-generated" in track.language_name.lower()
        kind = " (auto-generated)" if track.is_generated and not labelled else ""
        click.echo(f" {marker} {track.language_code:<8} {track.language_name}{kind}")


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@click.command(cls=_DownloaderCommand, context_settings=CONTEXT_SETTINGS)
@click.argument("url", metavar="URL", required=False)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output filename (default: <video-id>.<format>).",
)
@click.option(
    "--lang", "-l",
    default=None,
    envvar="YT_TRANSCRIPT_LANG",
    help="Language code (e.g. ja, en, ko).  Defaults to the first manual track.",
)
@click.option(
    "--list-langs", "list_langs",
    is_flag=True,
    help="List available caption languages and exit.",
)
@click.option(
    "--format", "-f",
    "fmt",                           # avoid shadowing the builtin "format"
    default=None,
    envvar="YT_TRANSCRIPT_FORMAT",
    callback=_validate_format,
    metavar="FORMAT",
    help="Output format: txt, srt, json (default: txt).",
)
@click.option(
    "--timestamps", "-t",
    is_flag=True,
    help="Include [MM:SS] timestamps (txt format only).",
)
@click.option(
    "--proxy",
    default=None,
    envvar="YT_TRANSCRIPT_PROXY",
    help="HTTP(S) proxy URL for all requests to YouTube.",
)
@click.option("--verbose", is_flag=True, help="Log progress to stderr.")
@click.version_option(
    __version__, "-v", "--version",
    prog_name=PROG_NAME,
    message="%(prog)s v%(version)s",
)
def main(
    url: str | None,
    output: str | None,
    lang: str | None,
    list_langs: bool,
    fmt: OutputFormat,
    timestamps: bool,
    proxy: str | None,
    verbose: bool,
) -> None:
    """
    Download YouTube video transcripts (captions).

    URL can be a full YouTube URL or an 11-character video ID.
    """
    setup_logging(verbose)

    if not url:
        raise ArgumentError("Missing YouTube URL or video ID.")

    api = build_api(proxy)

    try:
        if list_langs:
            video_id, catalog, default = list_languages(url, api=api)
            _print_catalog(video_id, catalog, default)
            return

        result = download(url, lang=lang, fmt=fmt, timestamps=timestamps, api=api)
    except TranscriptError as exc:
        # No traceback for end-users; the message already says what went wrong.
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    path = output or result.default_filename
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(result.content)
    except OSError as exc:
        click.echo(f"Error: could not write {path}: {exc.strerror or exc}", err=True)
        sys.exit(1)

    click.echo(f"Downloaded {len(result.lines)} lines ({result.track.language_name})")
    click.echo(f"Saved: {path}")
