"""Rhyme-pattern and syllable analysis for song lyrics and poems."""

from .core import LyricsParser, ParsedLyrics, Stanza, Verse, parse_lyrics

__version__ = "0.1.0"

__all__ = ["LyricsParser", "ParsedLyrics", "Stanza", "Verse", "parse_lyrics", "__version__"]
