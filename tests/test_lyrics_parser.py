import json
import logging

from lyric_prosody import parse_lyrics
from lyric_prosody.core.classifier import ASSONANCE, CONSONANCE, RHYME, keys_rhyme
from lyric_prosody.core.parser import LyricsParser


def test_roses_are_red_pattern(roses_lyrics):
    result = parse_lyrics(roses_lyrics)

    assert len(result.stanzas) == 1
    stanza = result.stanzas[0]
    assert stanza.index == 1
    assert stanza.rhyme_pattern == "ABCB"
    assert [verse.index for verse in stanza.verses] == [1, 2, 3, 4]
    assert [verse.rhyme_index for verse in stanza.verses] == ["A", "B", "C", "B"]
    assert [verse.rhyme_type for verse in stanza.verses] == ["", RHYME, "", RHYME]
    assert [verse.rhyming_syllable for verse in stanza.verses] == ["ed", "ue", "et", "oo"]
    assert stanza.verses[0].syllable_count == 4
    assert all(verse.syllable_count >= 1 for verse in stanza.verses)


def test_pattern_length_matches_verse_count(roses_lyrics):
    result = parse_lyrics(roses_lyrics + "\n\nOne more line\nand another one")

    for stanza in result.stanzas:
        assert len(stanza.rhyme_pattern) == len(stanza.verses)
        assert stanza.rhyme_labels == tuple(stanza.rhyme_pattern)


def test_stanzas_split_on_blank_lines():
    text = "\n\n  First line\nSecond line  \n\n \t \n\nThird line\n\n\n"

    result = parse_lyrics(text)

    assert [stanza.index for stanza in result.stanzas] == [1, 2]
    assert [verse.text for verse in result.stanzas[0].verses] == ["First line", "Second line"]
    assert [verse.text for verse in result.stanzas[1].verses] == ["Third line"]


def test_windows_line_endings_are_normalised():
    result = parse_lyrics("Roses are red\r\nViolets are blue\r\n\r\nSugar is sweet")

    assert len(result.stanzas) == 2
    assert [verse.text for verse in result.stanzas[0].verses] == ["Roses are red", "Violets are blue"]


def test_verse_text_keeps_punctuation():
    result = parse_lyrics("Look at the sky!\nSo very high.")

    stanza = result.stanzas[0]
    assert stanza.verses[0].text == "Look at the sky!"
    assert stanza.verses[0].rhyming_syllable == "igh"
    assert stanza.rhyme_pattern == "AA"


def test_italian_assonance():
    result = parse_lyrics("Ho visto un amico\nche era sparito")

    stanza = result.stanzas[0]
    assert stanza.rhyme_pattern == "AA"
    assert [verse.rhyme_type for verse in stanza.verses] == [ASSONANCE, ASSONANCE]


def test_shared_consonant_tail_groups_verses():
    stanza = parse_lyrics("the present\nthe giant").stanzas[0]

    # "ent"/"ant" fail the broad test but still group on consonance
    assert not keys_rhyme("ent", "ant")
    assert stanza.rhyme_pattern == "AA"
    assert [verse.rhyme_type for verse in stanza.verses] == [CONSONANCE, CONSONANCE]


def test_empty_input_yields_no_stanzas():
    assert parse_lyrics("").stanzas == ()
    assert parse_lyrics("  \n\n \n").stanzas == ()
    assert parse_lyrics(None).stanzas == ()


def test_as_dict_is_json_serialisable(roses_lyrics):
    payload = parse_lyrics(roses_lyrics).as_dict()

    decoded = json.loads(json.dumps(payload))
    verse = decoded["stanzas"][0]["verses"][1]
    assert set(verse) == {
        "index",
        "text",
        "rhyme_index",
        "rhyming_syllable",
        "rhyme_type",
        "syllable_count",
    }
    assert verse["rhyme_index"] == "B"
    assert decoded["stanzas"][0]["rhyme_pattern"] == "ABCB"


def test_parser_logs_summary(caplog, roses_lyrics):
    caplog.set_level(logging.DEBUG, logger="lyric_prosody.core.parser")

    LyricsParser().parse_lyrics(roses_lyrics + "\n\nAnother stanza")

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Lyrics analysed") and '"stanzas": 2' in message for message in messages)
    assert any('"pattern": "ABCB"' in message for message in messages)
