"""Result records produced by the lyrics parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Verse:
    """A single line of a stanza together with its prosody annotations."""

    index: int
    text: str
    rhyming_syllable: str
    syllable_count: int
    rhyme_index: str = ""
    rhyme_type: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "text": self.text,
            "rhyme_index": self.rhyme_index,
            "rhyming_syllable": self.rhyming_syllable,
            "rhyme_type": self.rhyme_type,
            "syllable_count": self.syllable_count,
        }


@dataclass(frozen=True)
class Stanza:
    """A block of verses separated from its neighbours by blank lines."""

    index: int
    verses: Tuple[Verse, ...]
    rhyme_pattern: str

    @property
    def rhyme_labels(self) -> Tuple[str, ...]:
        return tuple(verse.rhyme_index for verse in self.verses)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "verses": [verse.as_dict() for verse in self.verses],
            "rhyme_pattern": self.rhyme_pattern,
        }


@dataclass(frozen=True)
class ParsedLyrics:
    """Full analysis of a lyric text."""

    stanzas: Tuple[Stanza, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        return {"stanzas": [stanza.as_dict() for stanza in self.stanzas]}


__all__ = ["Verse", "Stanza", "ParsedLyrics"]
