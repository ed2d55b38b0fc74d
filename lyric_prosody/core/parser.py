"""Split lyric text into stanzas and verses and annotate their prosody."""

from __future__ import annotations

import re
from typing import List, Optional

from lyric_prosody.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from lyric_prosody.utils.syllables import count_syllables

from .grouper import StanzaGrouper
from .models import ParsedLyrics, Stanza, Verse
from .sound import extract_rhyming_syllable, get_last_word

_STANZA_BREAK = re.compile(r"\n\s*\n")
_LINE_ENDINGS = re.compile(r"\r\n?")

_STANZA_COUNTER = create_counter(
    "lyric_prosody_stanzas_total",
    "Number of stanzas analysed by the lyrics parser.",
)
_VERSE_COUNTER = create_counter(
    "lyric_prosody_verses_total",
    "Number of verses analysed by the lyrics parser.",
)
_PARSE_DURATION = create_histogram(
    "lyric_prosody_parse_seconds",
    "Time spent analysing one lyric text.",
)


class LyricsParser:
    """Analyse lyrics for rhyme patterns and syllable counts."""

    def __init__(self, grouper: Optional[StanzaGrouper] = None) -> None:
        self.grouper = grouper or StanzaGrouper()
        self._logger = get_logger(__name__).bind(component="lyrics_parser")

    def parse_lyrics(self, lyrics: Optional[str]) -> ParsedLyrics:
        """Return the stanzas of ``lyrics`` with every verse annotated."""

        text = lyrics or ""
        with start_span("lyrics.parse", {"lyrics.length": len(text)}) as span:
            try:
                with _PARSE_DURATION.time():
                    stanza_texts = self.split_into_stanzas(text)
                    stanzas = tuple(
                        self._parse_stanza(stanza_text, position)
                        for position, stanza_text in enumerate(stanza_texts, start=1)
                    )
            except Exception as exc:
                record_exception(span, exc)
                raise

            verse_total = sum(len(stanza.verses) for stanza in stanzas)
            add_span_attributes(
                span,
                {"lyrics.stanzas": len(stanzas), "lyrics.verses": verse_total},
            )

        _STANZA_COUNTER.inc(len(stanzas))
        _VERSE_COUNTER.inc(verse_total)
        self._logger.info(
            "Lyrics analysed",
            context={"stanzas": len(stanzas), "verses": verse_total},
        )
        return ParsedLyrics(stanzas=stanzas)

    @staticmethod
    def split_into_stanzas(lyrics: str) -> List[str]:
        """Split on blank lines, dropping empty stanzas."""

        normalized = _LINE_ENDINGS.sub("\n", lyrics)
        stanzas = (stanza.strip() for stanza in _STANZA_BREAK.split(normalized))
        return [stanza for stanza in stanzas if stanza]

    @staticmethod
    def split_into_lines(stanza_text: str) -> List[str]:
        lines = (line.strip() for line in stanza_text.split("\n"))
        return [line for line in lines if line]

    def _parse_stanza(self, stanza_text: str, position: int) -> Stanza:
        verses = [
            Verse(
                index=line_number,
                text=line,
                rhyming_syllable=extract_rhyming_syllable(get_last_word(line)),
                syllable_count=count_syllables(line),
            )
            for line_number, line in enumerate(self.split_into_lines(stanza_text), start=1)
        ]
        grouping = self.grouper.group(verses)
        self._logger.debug(
            "Stanza grouped",
            context={
                "stanza": position,
                "verses": len(verses),
                "pattern": grouping.pattern,
            },
        )
        return Stanza(index=position, verses=grouping.verses, rhyme_pattern=grouping.pattern)


def parse_lyrics(lyrics: Optional[str]) -> ParsedLyrics:
    """Convenience wrapper around :meth:`LyricsParser.parse_lyrics`."""

    return LyricsParser().parse_lyrics(lyrics)


__all__ = ["LyricsParser", "parse_lyrics"]
