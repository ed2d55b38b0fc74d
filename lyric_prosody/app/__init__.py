"""Command-line surface for the lyric prosody analyzer."""

from .cli import main
from .formatter import LyricsReportFormatter

__all__ = ["LyricsReportFormatter", "main"]
