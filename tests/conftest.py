import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lyric_prosody.core.models import Verse
from lyric_prosody.core.sound import extract_rhyming_syllable, get_last_word
from lyric_prosody.utils.syllables import count_syllables


def build_verses(*lines):
    """Return unlabelled verses for ``lines`` as the parser would create them."""

    return [
        Verse(
            index=position,
            text=line,
            rhyming_syllable=extract_rhyming_syllable(get_last_word(line)),
            syllable_count=count_syllables(line),
        )
        for position, line in enumerate(lines, start=1)
    ]


@pytest.fixture
def make_verses():
    return build_verses


@pytest.fixture
def roses_lyrics():
    return "Roses are red\nViolets are blue\nSugar is sweet\nAnd so are you"
