"""Allow `python -m yt_transcript_downloader`."""

from yt_transcript_downloader.cli import PROG_NAME, main

if __name__ == "__main__":
    main(prog_name=PROG_NAME)
