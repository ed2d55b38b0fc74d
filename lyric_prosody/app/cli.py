"""Command-line entry point for analysing lyrics.

Examples::

    lyrics-prosody "Roses are red\nViolets are blue" "Valentine"
    lyrics-prosody "Nel mezzo del cammin di nostra vita" --json
    cat song.txt | lyrics-prosody --stdin
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from lyric_prosody.core.parser import parse_lyrics
from lyric_prosody.utils.logging_config import configure_logging
from lyric_prosody.utils.observability import get_logger

from .formatter import LyricsReportFormatter

DEFAULT_TITLE = "Custom Lyrics"

_logger = get_logger(__name__).bind(component="cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lyrics-prosody",
        description=(
            "Analyse rhyme patterns and syllable counts of song lyrics or poems. "
            "Separate stanzas with blank lines; a literal '\\n' in the argument "
            "is read as a line break."
        ),
    )
    parser.add_argument("lyrics", nargs="?", help="Lyrics text to analyse.")
    parser.add_argument(
        "title",
        nargs="?",
        default=DEFAULT_TITLE,
        help=f"Title shown in the report (defaults to '{DEFAULT_TITLE}').",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read the lyrics from standard input instead of the first argument.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the analysis as JSON instead of a formatted report.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (defaults to LYRICS_PROSODY_LOG_LEVEL or WARNING).",
    )
    return parser


def _resolve_lyrics(args: argparse.Namespace) -> Optional[str]:
    if args.stdin:
        # With --stdin the first positional, if any, is the title.
        if args.lyrics is not None and args.title == DEFAULT_TITLE:
            args.title = args.lyrics
        return sys.stdin.read()
    if args.lyrics is None:
        return None
    return args.lyrics.replace("\\n", "\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, default=logging.WARNING)

    lyrics = _resolve_lyrics(args)
    if lyrics is None:
        print("🎵 LYRICS PROSODY ANALYZER - Command Line Tool")
        parser.print_usage()
        return 0

    try:
        result = parse_lyrics(lyrics)
    except Exception as exc:
        _logger.exception("Lyrics analysis failed", context={"title": args.title})
        print(f"❌ Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        json.dump(result.as_dict(), sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
        return 0

    print(LyricsReportFormatter().format_report(args.title, lyrics, result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
