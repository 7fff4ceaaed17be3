import pytest

from kinko_notation.models import ScoreEntry
from kinko_notation.notes import ShakuNote
from kinko_notation.surfaces import RecordingSurface


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def ro_note():
    # ロ at (100, 100) with the default 32 px font
    return ShakuNote("ro", x=100, y=100)


@pytest.fixture
def eleven_notes():
    # one more note than a column holds
    romaji = ["ro", "tsu", "re", "chi", "ri", "u", "hi"]
    return [ShakuNote(romaji[i % len(romaji)]) for i in range(11)]


@pytest.fixture
def phrase_entries():
    # ro, dotted tsu in kan, and a Western pitch that needs meri
    return [
        ScoreEntry(pitch="ro"),
        ScoreEntry(pitch="tsu", octave=1, dotted=True),
        ScoreEntry(pitch="C#5"),
    ]
