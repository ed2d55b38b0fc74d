"""Classification of the relation between two rhyme keys."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

from .sound import extract_rhyming_syllable


RHYME = "rhyme"
ASSONANCE = "assonance"
CONSONANCE = "consonance"
NONE = "none"

_CONSONANT_PATTERN = re.compile(r"[bcdfghjklmnpqrstvwxz]")
_CONSONANT_TAIL_PATTERN = re.compile(r"[bcdfghjklmnpqrstvwxyz]+$")


def _index_families(families: Iterable[Iterable[str]]) -> Mapping[str, FrozenSet[str]]:
    index: Dict[str, FrozenSet[str]] = {}
    for family in families:
        members = frozenset(family)
        for member in members:
            index[member] = index.get(member, frozenset()) | members
    return MappingProxyType(index)


_PERFECT_FAMILIES: Tuple[Tuple[str, ...], ...] = (
    ("ar", "are"),
    ("ay", "ey", "ai", "eigh"),
    ("igh", "y", "ie", "ky", "i"),
    ("ow", "ou"),
    ("ing",),
    ("ight", "ite"),
    ("oo", "ue", "ew"),
)

_ASSONANCE_FAMILIES: Tuple[Tuple[str, ...], ...] = (
    # Italian -o endings
    ("tro", "nto", "ato", "eto", "oto"),
    # Italian -ico / -ito
    ("ico", "ito"),
    # English -ic / -kee
    ("ic", "kee"),
)

_VOWEL_FAMILIES: Tuple[Tuple[str, ...], ...] = (
    ("o", "ao", "eo", "io"),
    ("i", "ai", "ei"),
    ("e", "ee", "ie"),
)

PERFECT_RHYME_GROUPS = _index_families(_PERFECT_FAMILIES)
ASSONANCE_GROUPS = _index_families(_ASSONANCE_FAMILIES)
BROAD_RHYME_GROUPS = _index_families(_PERFECT_FAMILIES + _ASSONANCE_FAMILIES)
VOWEL_SIMILARITY = _index_families(_VOWEL_FAMILIES)


def _same_family(groups: Mapping[str, FrozenSet[str]], key1: str, key2: str) -> bool:
    family = groups.get(key1)
    return family is not None and key2 in family


@dataclass(frozen=True)
class RhymeAnalysis:
    """Outcome of comparing two words."""

    rhymes: bool
    rhyme_type: str

    @classmethod
    def none(cls) -> "RhymeAnalysis":
        return cls(rhymes=False, rhyme_type=NONE)


def _vowel_pattern(key: str) -> str:
    return _CONSONANT_PATTERN.sub("", key.lower())


def _consonant_tail(key: str) -> str:
    match = _CONSONANT_TAIL_PATTERN.search(key)
    return match.group(0) if match else ""


def check_assonance(key1: str, key2: str) -> bool:
    """Return whether the vowel skeletons of two keys are equal or similar."""

    vowels1 = _vowel_pattern(key1)
    vowels2 = _vowel_pattern(key2)
    if not vowels1 or not vowels2:
        return False
    return vowels1 == vowels2 or _same_family(VOWEL_SIMILARITY, vowels1, vowels2)


def keys_rhyme(key1: str, key2: str) -> bool:
    """Broad test used to decide whether two keys rhyme at all."""

    if not key1 or not key2:
        return False
    if key1 == key2:
        return True
    if _same_family(BROAD_RHYME_GROUPS, key1, key2):
        return True
    return check_assonance(key1, key2)


def words_rhyme(word1: str, word2: str) -> bool:
    """Broad rhyme test on two words, assonance included."""

    return keys_rhyme(extract_rhyming_syllable(word1), extract_rhyming_syllable(word2))


def is_perfect_rhyme(key1: str, key2: str) -> bool:
    return key1 == key2 or _same_family(PERFECT_RHYME_GROUPS, key1, key2)


def is_assonance(key1: str, key2: str) -> bool:
    return key1 != key2 and _same_family(ASSONANCE_GROUPS, key1, key2)


def is_consonance(key1: str, key2: str) -> bool:
    tail = _consonant_tail(key1)
    return bool(tail) and tail == _consonant_tail(key2)


def classify_keys(key1: str, key2: str) -> str:
    """Return the most specific relation between two keys.

    Perfect rhyme is tried first, then the assonance families, then a shared
    trailing consonant cluster. An empty key never relates to anything.
    """

    if not key1 or not key2:
        return NONE
    if is_perfect_rhyme(key1, key2):
        return RHYME
    if is_assonance(key1, key2):
        return ASSONANCE
    if is_consonance(key1, key2):
        return CONSONANCE
    return NONE


def analyze_rhyme(word1: str, word2: str) -> RhymeAnalysis:
    """Classify the relation between the rhyme keys of two words."""

    relation = classify_keys(
        extract_rhyming_syllable(word1), extract_rhyming_syllable(word2)
    )
    if relation == NONE:
        return RhymeAnalysis.none()
    return RhymeAnalysis(rhymes=True, rhyme_type=relation)


def merge_relation(current: str, incoming: str) -> str:
    """Fold a newly observed relation into a group's running relation.

    ``rhyme`` always wins and is never downgraded; ``assonance`` and
    ``consonance`` only replace ``none``.
    """

    if incoming == RHYME:
        return RHYME
    if incoming in (ASSONANCE, CONSONANCE) and current == NONE:
        return incoming
    return current


__all__ = [
    "RHYME",
    "ASSONANCE",
    "CONSONANCE",
    "NONE",
    "PERFECT_RHYME_GROUPS",
    "ASSONANCE_GROUPS",
    "BROAD_RHYME_GROUPS",
    "VOWEL_SIMILARITY",
    "RhymeAnalysis",
    "analyze_rhyme",
    "check_assonance",
    "classify_keys",
    "is_assonance",
    "is_consonance",
    "is_perfect_rhyme",
    "keys_rhyme",
    "merge_relation",
    "words_rhyme",
]
