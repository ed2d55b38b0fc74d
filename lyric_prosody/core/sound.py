"""Rhyme-key extraction: the perceived ending sound of a word."""

from __future__ import annotations

import re
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Tuple


_NON_WORD_PATTERN = re.compile(r"[^\w]")
_VOWEL_CONSONANT_ENDING = re.compile(r"[aeiou][bcdfghjklmnpqrstvwxyz]$")

# Irregular words whose ending sound the suffix rules would get wrong.
RHYME_KEY_EXCEPTIONS: Mapping[str, str] = MappingProxyType(
    {
        # English
        "star": "ar", "are": "ar", "car": "ar", "far": "ar", "bar": "ar",
        "high": "igh", "sky": "igh", "fly": "igh", "try": "igh",
        "cry": "igh", "die": "igh", "tie": "igh", "pie": "igh",
        "lie": "igh", "why": "igh", "guy": "igh", "buy": "igh",
        "dry": "igh", "eye": "igh", "spy": "igh", "shy": "igh",
        "my": "y", "by": "y",
        "you": "oo", "do": "oo", "to": "oo", "too": "oo", "two": "oo",
        "who": "oo", "through": "oo", "shoe": "oo",
        "blue": "ue", "true": "ue", "clue": "ue", "glue": "ue", "due": "ue",
        "topic": "ic",
        "milwaukee": "kee",
        # Italian
        "filtro": "tro",
        "dipinto": "nto",
        "amico": "ico",
        "sparito": "ito",
        "zion": "on",
        "sole": "ole",
        "sali": "ali",
    }
)

# Checked in order; the first matching suffix is the key.
RHYME_SUFFIXES: Tuple[str, ...] = (
    "ing",
    "tion",
    "ness",
    "ful",
    "less",
    "ly",
    "ed",
    "er",
    "est",
    "ize",
    "ise",
    "ous",
    "able",
    "ible",
    "ight",
    "ar",
    "igh",
)


@lru_cache(maxsize=4096)
def extract_rhyming_syllable(word: str) -> str:
    """Return the rhyme key for ``word``.

    Lookup order: exception table, then the ordered suffix list, then a
    fallback on the last two or three letters. Words shorter than three
    letters are returned unchanged after cleaning.
    """

    if not word:
        return ""

    clean = _NON_WORD_PATTERN.sub("", word.lower())

    exception = RHYME_KEY_EXCEPTIONS.get(clean)
    if exception:
        return exception

    for suffix in RHYME_SUFFIXES:
        if clean.endswith(suffix):
            return suffix

    if len(clean) >= 3:
        last_two = clean[-2:]
        if _VOWEL_CONSONANT_ENDING.search(last_two):
            return last_two
        return clean[-3:] if len(clean) >= 4 else last_two

    return clean


def get_last_word(line: str) -> str:
    """Return the final whitespace-separated token of ``line``, punctuation included."""

    words = (line or "").split()
    return words[-1] if words else ""


__all__ = [
    "RHYME_KEY_EXCEPTIONS",
    "RHYME_SUFFIXES",
    "extract_rhyming_syllable",
    "get_last_word",
]
