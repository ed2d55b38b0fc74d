"""Assignment of rhyme-group letters to the verses of a stanza."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Sequence, Tuple

from .classifier import NONE, classify_keys, merge_relation
from .models import Verse
from .sound import extract_rhyming_syllable, get_last_word

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def rhyme_label(position: int) -> str:
    """Return the label of the ``position``-th group (0-based).

    Labels run A..Z, then AA, AB, ... in bijective base 26.
    """

    if position < 0:
        raise ValueError("group position must be non-negative")
    label = ""
    remaining = position + 1
    while remaining:
        remaining, digit = divmod(remaining - 1, len(_ALPHABET))
        label = _ALPHABET[digit] + label
    return label


@dataclass
class _RhymeGroup:
    label: str
    members: List[int] = field(default_factory=list)
    relation: str = NONE

    @property
    def reported_relation(self) -> str:
        return "" if len(self.members) == 1 else self.relation


@dataclass(frozen=True)
class StanzaGrouping:
    """Labels, pattern and relations computed for one stanza."""

    labels: Tuple[str, ...]
    pattern: str
    relations: Tuple[str, ...]
    verses: Tuple[Verse, ...]


class StanzaGrouper:
    """Greedy single-pass grouping of verses by the sound of their last word.

    Each verse joins the group of the first earlier verse it relates to, in
    verse order, even if a later verse would relate more strongly.
    """

    def group(self, verses: Sequence[Verse]) -> StanzaGrouping:
        keys = [extract_rhyming_syllable(get_last_word(verse.text)) for verse in verses]
        groups: List[_RhymeGroup] = []
        membership: List[_RhymeGroup] = []

        for index, key in enumerate(keys):
            joined = None
            for previous in range(index):
                relation = classify_keys(keys[previous], key)
                if relation == NONE:
                    continue
                joined = membership[previous]
                joined.members.append(index)
                joined.relation = merge_relation(joined.relation, relation)
                break

            if joined is None:
                joined = _RhymeGroup(label=rhyme_label(len(groups)), members=[index])
                groups.append(joined)
            membership.append(joined)

        labels = tuple(group.label for group in membership)
        relations = tuple(group.reported_relation for group in membership)
        updated = tuple(
            replace(verse, rhyme_index=label, rhyme_type=relation)
            for verse, label, relation in zip(verses, labels, relations)
        )
        return StanzaGrouping(
            labels=labels,
            pattern="".join(labels),
            relations=relations,
            verses=updated,
        )


def group_verses(verses: Sequence[Verse]) -> StanzaGrouping:
    return StanzaGrouper().group(verses)


__all__ = ["StanzaGrouper", "StanzaGrouping", "group_verses", "rhyme_label"]
