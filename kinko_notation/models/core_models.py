"""Core domain models for Kinko-ryū notation rendering."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Octave = Literal["otsu", "kan", "daikan"]
Step = Literal["ro", "tsu", "re", "chi", "ri", "u", "hi"]

# Absolute slack when comparing box edges, in surface units
EDGE_TOLERANCE = 1e-9


class KinkoSymbol(BaseModel):
    """One of the seven base Kinko-ryū note symbols.

    Symbols are immutable table entries. The same instance is returned
    whether a symbol is looked up by romaji, kana or reference pitch, so the
    three representations always agree.

    Attributes:
        kana: Katakana glyph drawn for the note (e.g. "ロ").
        romaji: Romanized name, unique across the table (e.g. "ro").
        pitch: Western reference pitch on a 1.8 shakuhachi (e.g. "D4").
        default_octave: Register the symbol is written in by default.
        fingering: Five hole states from top to bottom, True when closed.
        can_alter: Whether meri/kari alterations are commonly applied.
        unicode: Code point of the kana, for reference (e.g. "U+30ED").
    """

    model_config = ConfigDict(frozen=True)

    kana: str = Field(..., min_length=1, description="Katakana glyph")
    romaji: str = Field(..., min_length=1, description="Romanized name")
    pitch: str = Field(..., description="Western reference pitch")
    default_octave: Octave = Field("otsu", description="Default register")
    fingering: tuple[bool, bool, bool, bool, bool] = Field(
        ..., description="Hole states, True = closed"
    )
    can_alter: bool = Field(True, description="Meri/kari commonly applied")
    unicode: str = Field(..., description="Kana code point")


class PitchMapping(BaseModel):
    """Fingering for one Western pitch in the extended register table.

    Attributes:
        step: Romaji of the base symbol that is fingered.
        octave: Register index, 0 = otsu, 1 = kan, 2 = daikan.
        meri: Pitch is lowered by a half step.
        chu_meri: Pitch is lowered by an intermediate amount.
        dai_meri: Pitch is lowered by a whole step.
    """

    model_config = ConfigDict(frozen=True)

    step: Step
    octave: int = Field(..., ge=0, le=2, description="Register index")
    meri: bool = False
    chu_meri: bool = False
    dai_meri: bool = False

    @property
    def alteration(self) -> str | None:
        """Name of the alteration mark this fingering needs, if any."""
        if self.dai_meri:
            return "dai-meri"
        if self.chu_meri:
            return "chu-meri"
        if self.meri:
            return "meri"
        return None


class Point(BaseModel):
    """A 2D offset or coordinate in surface units."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0


class BoundingBox(BaseModel):
    """Axis-aligned box in surface coordinates, y growing downwards.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent (non-negative).
        height: Vertical extent (non-negative).
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="Left edge")
    y: float = Field(..., description="Top edge")
    width: float = Field(..., ge=0, description="Width")
    height: float = Field(..., ge=0, description="Height")

    @classmethod
    def from_center(
        cls, cx: float, cy: float, width: float, height: float
    ) -> "BoundingBox":
        """Build a box of the given size centred on (cx, cy)."""
        return cls(x=cx - width / 2, y=cy - height / 2, width=width, height=height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Return the smallest box containing both boxes.

        When one box already contains the other it is returned unchanged, so
        adding an empty box never perturbs the edges.
        """
        if self.contains(other):
            return self
        if other.contains(self):
            return other
        left = min(self.x, other.x)
        top = min(self.y, other.y)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return BoundingBox(x=left, y=top, width=right - left, height=bottom - top)

    def contains(self, other: "BoundingBox") -> bool:
        """Check whether `other` lies entirely inside this box.

        Edges are compared with a small tolerance since `right` and `bottom`
        are recomputed from the stored width and height.
        """
        return (
            self.x <= other.x + EDGE_TOLERANCE
            and self.y <= other.y + EDGE_TOLERANCE
            and other.right <= self.right + EDGE_TOLERANCE
            and other.bottom <= self.bottom + EDGE_TOLERANCE
        )
