"""Input models for score entries handed to the render pass.

The host application parses whatever import format it supports and passes
the engine an ordered list of `ScoreEntry` records. Validation happens here
so the rest of the pipeline can rely on well-formed values.
"""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

Duration = Literal["w", "h", "q", "8", "16", "32"]
Alteration = Literal["meri", "chu-meri", "dai-meri", "kari"]
Technique = Literal["yuri", "atari", "muraiki", "korokoro", "uchi", "suri", "ori"]


class ScoreEntry(BaseModel):
    """One note or rest in the input sequence.

    A non-rest entry identifies its note either through `pitch` (romaji,
    kana or Western pitch, which must resolve) or through `symbol` (a raw
    glyph that is drawn as-is when it does not resolve).

    Attributes:
        pitch: Romaji ("ro"), kana ("ロ") or Western pitch ("C#5").
        symbol: Explicit, possibly unresolved, glyph to draw.
        duration: Duration code, quarter note by default.
        octave: Register index for romaji/kana pitches (0-2).
        alterations: Pitch alteration marks to attach.
        techniques: Technique marks to attach.
        dotted: Whether the note carries a duration dot.
        rest: Whether the entry is a rest.
    """

    pitch: str | None = Field(None, description="Romaji, kana or Western pitch")
    symbol: str | None = Field(None, description="Explicit glyph to draw")
    duration: Duration = Field("q", description="Duration code")
    octave: int = Field(0, ge=0, le=2, description="0=otsu, 1=kan, 2=daikan")
    alterations: list[Alteration] = Field(
        default_factory=list, description="Pitch alteration marks"
    )
    techniques: list[Technique] = Field(
        default_factory=list, description="Technique marks"
    )
    dotted: bool = Field(False, description="Carries a duration dot")
    rest: bool = Field(False, description="Entry is a rest")

    @model_validator(mode="after")
    def _check_identifier(self) -> "ScoreEntry":
        if not self.rest and not (self.pitch or self.symbol):
            raise ValueError("a non-rest entry needs either 'pitch' or 'symbol'")
        return self
