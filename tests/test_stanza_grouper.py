import pytest

from lyric_prosody.core.classifier import ASSONANCE, CONSONANCE, RHYME
from lyric_prosody.core.grouper import StanzaGrouper, group_verses, rhyme_label


@pytest.mark.parametrize(
    ("position", "label"),
    [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"), (52, "BA"), (701, "ZZ"), (702, "AAA")],
)
def test_rhyme_label_sequence(position, label):
    assert rhyme_label(position) == label


def test_rhyme_label_rejects_negative_positions():
    with pytest.raises(ValueError):
        rhyme_label(-1)


def test_unrelated_verses_get_distinct_letters(make_verses):
    verses = make_verses("the cat", "a dog", "the sun", "a tree", "some milk")

    grouping = StanzaGrouper().group(verses)

    assert grouping.pattern == "ABCDE"
    assert grouping.labels == ("A", "B", "C", "D", "E")
    assert grouping.relations == ("", "", "", "", "")


def test_monorhyme_reports_rhyme_for_every_verse(make_verses):
    verses = make_verses("I want to sing", "Hear the birds singing", "Bells are ringing", "Everything")

    grouping = group_verses(verses)

    assert grouping.pattern == "AAAA"
    assert all(verse.rhyme_type == RHYME for verse in grouping.verses)


def test_first_matching_verse_wins_over_stronger_match(make_verses):
    verses = make_verses("the things I bought", "in the evening light", "under stars at night")

    grouping = group_verses(verses)

    # "light" and "night" rhyme perfectly, but both reach "bought" first.
    assert grouping.pattern == "AAA"
    assert grouping.relations == (CONSONANCE, CONSONANCE, CONSONANCE)


def test_rhyme_upgrades_group_relation(make_verses):
    verses = make_verses("the things I bought", "in the evening light", "the battle we fought")

    grouping = group_verses(verses)

    assert grouping.pattern == "AAA"
    assert grouping.relations == (RHYME, RHYME, RHYME)


def test_assonance_groups_and_singletons(make_verses):
    verses = make_verses("Ho visto un amico", "dietro il filtro", "che era sparito")

    grouping = group_verses(verses)

    assert grouping.pattern == "ABA"
    assert grouping.relations == (ASSONANCE, "", ASSONANCE)


def test_exact_key_match_always_joins_group(make_verses):
    verses = make_verses("look at the sky!", "a different tune", "so very high.")

    grouping = group_verses(verses)

    assert grouping.pattern == "ABA"
    assert grouping.verses[2].rhyme_index == "A"


def test_grouping_returns_new_verses(make_verses):
    verses = make_verses("Roses are red", "Violets are blue")

    grouping = group_verses(verses)

    assert [verse.rhyme_index for verse in verses] == ["", ""]
    assert [verse.rhyme_index for verse in grouping.verses] == ["A", "B"]
    assert [verse.text for verse in grouping.verses] == ["Roses are red", "Violets are blue"]


def test_empty_stanza():
    grouping = group_verses([])

    assert grouping.pattern == ""
    assert grouping.labels == ()
    assert grouping.verses == ()


def test_more_than_26_groups_use_two_letter_labels(make_verses):
    verses = make_verses(*[f"line {n}" for n in range(28)])

    grouping = group_verses(verses)

    assert grouping.labels[:3] == ("A", "B", "C")
    assert grouping.labels[26:] == ("AA", "AB")
    assert len(grouping.labels) == 28
    # two-letter labels make the pattern longer than the verse count
    assert len(grouping.pattern) == 30
