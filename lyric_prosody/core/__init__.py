"""Core phonetic heuristics for lyric prosody analysis."""

from .classifier import (
    ASSONANCE,
    CONSONANCE,
    NONE,
    RHYME,
    RhymeAnalysis,
    analyze_rhyme,
    classify_keys,
    keys_rhyme,
    merge_relation,
    words_rhyme,
)
from .grouper import StanzaGrouper, StanzaGrouping, group_verses, rhyme_label
from .models import ParsedLyrics, Stanza, Verse
from .parser import LyricsParser, parse_lyrics
from .sound import extract_rhyming_syllable, get_last_word

__all__ = [
    "ASSONANCE",
    "CONSONANCE",
    "NONE",
    "RHYME",
    "LyricsParser",
    "ParsedLyrics",
    "RhymeAnalysis",
    "Stanza",
    "StanzaGrouper",
    "StanzaGrouping",
    "Verse",
    "analyze_rhyme",
    "classify_keys",
    "extract_rhyming_syllable",
    "get_last_word",
    "group_verses",
    "keys_rhyme",
    "merge_relation",
    "parse_lyrics",
    "rhyme_label",
    "words_rhyme",
]
