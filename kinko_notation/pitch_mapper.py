"""Pitch and symbol mapping for Kinko-ryū shakuhachi notation.

This module holds the read-only tables that translate between the three ways
a note can be named (romaji, kana, Western pitch) and the fingering data the
renderer needs. Shakuhachi fingering is not a linear transform of Western
pitch: the same seven symbols repeat in every register, with alteration marks
standing in for accidentals. The extended table `KINKO_PITCH_MAP` encodes that
structure once so callers never re-derive it.

All lookups fail loudly: a symbol that cannot be mapped cannot be drawn
meaningfully, so every miss raises a `NotationError` subclass.
"""

import re
from functools import lru_cache
from types import MappingProxyType

from kinko_notation.models import KinkoSymbol, PitchMapping


# Custom exceptions
class NotationError(Exception):
    """Base exception for notation lookup errors."""

    pass


class SymbolLookupError(NotationError, LookupError):
    """Raised when a symbol matches no romaji, kana or reference pitch."""

    pass


class UnknownNote(SymbolLookupError):
    """Raised when a romaji name is not one of the base symbols."""

    pass


class InvalidPitchFormat(NotationError, ValueError):
    """Raised when a string is not a Western pitch such as "C#4" or "Bb3"."""

    pass


class OutOfRange(NotationError, KeyError):
    """Raised when a well-formed pitch lies outside the fingering table."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


# ASCII digits only; the octave may be negative (C-1 is MIDI 0)
PITCH_PATTERN = re.compile(r"([A-G])([#b]?)(-?[0-9]+)")
PITCH_CACHE_SIZE = 256

PITCH_CLASSES = MappingProxyType(
    {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
)
ACCIDENTAL_OFFSETS = MappingProxyType({"#": 1, "b": -1, "": 0})

OCTAVE_NAMES = ("otsu", "kan", "daikan")
OCTAVE_SEMITONES = MappingProxyType({"otsu": 0, "kan": 12, "daikan": 24})

ALTERATION_SEMITONES = MappingProxyType(
    {"meri": -1, "chu-meri": -1, "dai-meri": -2, "kari": 1}
)


def _symbol(kana, romaji, pitch, fingering, can_alter=True):
    return KinkoSymbol(
        kana=kana,
        romaji=romaji,
        pitch=pitch,
        default_octave="otsu",
        fingering=fingering,
        can_alter=can_alter,
        unicode=f"U+{ord(kana):04X}",
    )


# Base symbols of a 1.8 shakuhachi (D pentatonic plus u and hi).
KINKO_SYMBOLS: MappingProxyType = MappingProxyType(
    {
        "ro": _symbol("ロ", "ro", "D4", (True, True, True, True, True)),
        "tsu": _symbol("ツ", "tsu", "F4", (True, True, True, True, False)),
        "re": _symbol("レ", "re", "G4", (True, True, True, False, False)),
        "chi": _symbol("チ", "chi", "A4", (True, True, False, False, False)),
        "ri": _symbol("リ", "ri", "C5", (True, False, False, False, False)),
        # u shares ro's fingering and relies on embouchure
        "u": _symbol("ウ", "u", "C4", (True, True, True, True, True), can_alter=False),
        "hi": _symbol("ヒ", "hi", "E4", (True, True, True, False, True)),
    }
)

_BY_KANA = MappingProxyType({s.kana: s for s in KINKO_SYMBOLS.values()})
_BY_PITCH = MappingProxyType({s.pitch: s for s in KINKO_SYMBOLS.values()})

if len(_BY_KANA) != len(KINKO_SYMBOLS) or len(_BY_PITCH) != len(KINKO_SYMBOLS):
    raise RuntimeError("Kinko symbol table has duplicate kana or reference pitches")


def _m(step, octave, **flags):
    return PitchMapping(step=step, octave=octave, **flags)


# Western pitch -> fingering for D shakuhachi, C4..B6.
# Enharmonic spellings share one entry.
KINKO_PITCH_MAP: MappingProxyType = MappingProxyType(
    {
        # otsu register
        "C4": _m("ro", 0, dai_meri=True),
        "C#4": _m("ro", 0, meri=True),
        "Db4": _m("ro", 0, meri=True),
        "D4": _m("ro", 0),
        "D#4": _m("tsu", 0, meri=True),
        "Eb4": _m("tsu", 0, meri=True),
        "E4": _m("tsu", 0, chu_meri=True),
        "F4": _m("tsu", 0),
        "F#4": _m("re", 0, meri=True),
        "Gb4": _m("re", 0, meri=True),
        "G4": _m("re", 0),
        "G#4": _m("u", 0),
        "Ab4": _m("u", 0),
        "A4": _m("chi", 0),
        "A#4": _m("chi", 0, meri=True),
        "Bb4": _m("chi", 0, meri=True),
        "B4": _m("ri", 0, chu_meri=True),
        "C5": _m("ri", 0),
        # kan register
        "C#5": _m("ro", 1, meri=True),
        "Db5": _m("ro", 1, meri=True),
        "D5": _m("ro", 1),
        "D#5": _m("tsu", 1, meri=True),
        "Eb5": _m("tsu", 1, meri=True),
        "E5": _m("tsu", 1, chu_meri=True),
        "F5": _m("tsu", 1),
        "F#5": _m("re", 1, meri=True),
        "Gb5": _m("re", 1, meri=True),
        "G5": _m("re", 1),
        "G#5": _m("chi", 1, meri=True),
        "Ab5": _m("chi", 1, meri=True),
        "A5": _m("chi", 1),
        "A#5": _m("chi", 1, chu_meri=True),
        "Bb5": _m("chi", 1, chu_meri=True),
        "B5": _m("ri", 1),
        "C6": _m("hi", 1),
        # daikan register
        "C#6": _m("ro", 2, meri=True),
        "Db6": _m("ro", 2, meri=True),
        "D6": _m("ro", 2),
        "D#6": _m("tsu", 2, meri=True),
        "Eb6": _m("tsu", 2, meri=True),
        "E6": _m("tsu", 2, chu_meri=True),
        "F6": _m("tsu", 2),
        "F#6": _m("re", 2, meri=True),
        "Gb6": _m("re", 2, meri=True),
        "G6": _m("re", 2),
        "G#6": _m("chi", 2, meri=True),
        "Ab6": _m("chi", 2, meri=True),
        "A6": _m("chi", 2),
        "A#6": _m("hi", 2, meri=True),
        "Bb6": _m("hi", 2, meri=True),
        "B6": _m("hi", 2),
    }
)


def get_kinko_symbols() -> list[str]:
    """Return the romaji names of all base symbols in table order."""
    return list(KINKO_SYMBOLS)


def get_symbol_by_romaji(romaji: str) -> KinkoSymbol | None:
    """Look up a base symbol by romaji, ignoring case."""
    return KINKO_SYMBOLS.get(romaji.lower())


def get_symbol_by_kana(kana: str) -> KinkoSymbol | None:
    """Look up a base symbol by its exact kana glyph."""
    return _BY_KANA.get(kana)


def get_symbol_by_pitch(pitch: str) -> KinkoSymbol | None:
    """Look up a base symbol by its exact reference pitch (e.g. "D4")."""
    return _BY_PITCH.get(pitch)


def parse_note(text: str) -> KinkoSymbol:
    """Resolve romaji, kana or a reference pitch to its base symbol.

    Romaji is tried first, then kana, then Western pitch. The returned symbol
    is the canonical table entry whichever form matched.

    Args:
        text: Romaji ("ro", "RO"), kana ("ロ") or reference pitch ("D4").

    Returns:
        The matching KinkoSymbol.

    Raises:
        SymbolLookupError: If no form matches.
    """
    symbol = (
        get_symbol_by_romaji(text)
        or get_symbol_by_kana(text)
        or get_symbol_by_pitch(text)
    )
    if symbol is None:
        raise SymbolLookupError(f"No Kinko symbol matches {text!r}")
    return symbol


@lru_cache(maxsize=PITCH_CACHE_SIZE)
def pitch_to_midi(pitch: str) -> int:
    """Convert Western pitch notation to a MIDI note number.

    Uses `(octave + 1) * 12 + pitch_class + accidental`, so C4 is 60.

    Args:
        pitch: Letter A-G, optional "#" or "b", decimal octave (e.g. "Bb3",
            "C-1").

    Returns:
        The MIDI note number.

    Raises:
        InvalidPitchFormat: If the string is not in that notation.
    """
    match = PITCH_PATTERN.fullmatch(pitch)
    if match is None:
        raise InvalidPitchFormat(f"Invalid pitch notation: {pitch!r}")
    letter, accidental, octave = match.groups()
    return (int(octave) + 1) * 12 + PITCH_CLASSES[letter] + ACCIDENTAL_OFFSETS[accidental]


def get_note_midi(romaji: str, octave_index: int) -> int:
    """Return the MIDI number of a base symbol in a given register.

    Each register step adds exactly 12 semitones to the reference pitch.

    Args:
        romaji: Romaji name of a base symbol.
        octave_index: 0 = otsu, 1 = kan, 2 = daikan.

    Raises:
        UnknownNote: If `romaji` is not a base symbol.
        ValueError: If `octave_index` is not 0, 1 or 2.
    """
    symbol = get_symbol_by_romaji(romaji)
    if symbol is None:
        raise UnknownNote(f"Unknown note: {romaji!r}")
    if not 0 <= octave_index < len(OCTAVE_NAMES):
        raise ValueError(f"Octave index must be 0-2, got {octave_index}")
    return pitch_to_midi(symbol.pitch) + OCTAVE_SEMITONES[OCTAVE_NAMES[octave_index]]


def lookup_pitch(pitch: str) -> PitchMapping:
    """Find the fingering for a Western pitch in the extended table.

    Args:
        pitch: Western pitch between C4 and B6, either enharmonic spelling.

    Returns:
        The PitchMapping for that pitch.

    Raises:
        InvalidPitchFormat: If the string is not Western pitch notation.
        OutOfRange: If the pitch is well formed but outside C4..B6.
    """
    if PITCH_PATTERN.fullmatch(pitch) is None:
        raise InvalidPitchFormat(f"Invalid pitch notation: {pitch!r}")
    try:
        return KINKO_PITCH_MAP[pitch]
    except KeyError:
        raise OutOfRange(f"Pitch {pitch!r} is outside the range C4..B6") from None


def is_western_pitch(text: str) -> bool:
    """Check whether a string is written in Western pitch notation."""
    return PITCH_PATTERN.fullmatch(text) is not None
