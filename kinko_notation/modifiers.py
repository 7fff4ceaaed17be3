"""Glyph decorations attached to Kinko notes.

A modifier draws itself relative to the anchor of the note it belongs to
(the glyph centre on x, the baseline on y). The variant set is closed:

- `OctaveMark`: 甲 or 大 above-right of the note for the kan/daikan registers.
- `AlterationMark`: メ, 中, 大 or カ left of the note for meri/kari.
- `TechniqueMark`: vibrato, attack and slide symbols.
- `DurationDot`: dotted-duration dot, which also widens the layout gap.

Geometry (offset, width, height) is fixed per variant and kind and lives in
class-level tables; instances only carry their kind and a color, so reading
geometry never touches shared state.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import ClassVar, NamedTuple

from kinko_notation import constants
from kinko_notation.models import BoundingBox, Point
from kinko_notation.surfaces import DrawingSurface


class Modifier(ABC):
    """Base class of the four modifier variants.

    Args:
        color: Color the modifier is drawn in.
    """

    kind: ClassVar[str]

    def __init__(self, color: str = constants.NOTE_COLOR):
        self.color = color

    @abstractmethod
    def render(self, surface: DrawingSurface, anchor_x: float, anchor_y: float) -> None:
        """Draw the modifier relative to a note anchored at (anchor_x, anchor_y)."""

    @abstractmethod
    def get_offset(self) -> Point:
        """Offset of the modifier's box centre from the note anchor."""

    @abstractmethod
    def get_width(self) -> float:
        """Width of the modifier's box."""

    @abstractmethod
    def get_height(self) -> float:
        """Height of the modifier's box."""

    def get_bbox(self, anchor_x: float, anchor_y: float) -> BoundingBox:
        """Box of this modifier for a note anchored at (anchor_x, anchor_y)."""
        offset = self.get_offset()
        return BoundingBox.from_center(
            anchor_x + offset.x,
            anchor_y + offset.y,
            self.get_width(),
            self.get_height(),
        )

    def _draw_glyph(
        self,
        surface: DrawingSurface,
        glyph: str,
        anchor_x: float,
        anchor_y: float,
        font_size: float,
        font_weight: int | str,
        font_family: str = constants.NOTE_FONT_FAMILY,
    ) -> None:
        """Draw `glyph` so that its visual centre sits on the box centre."""
        offset = self.get_offset()
        surface.draw_text(
            glyph,
            anchor_x + offset.x,
            # text is placed by its baseline, below the visual centre
            anchor_y + offset.y + font_size * constants.GLYPH_CENTER_RATIO,
            font_size,
            font_family,
            self.color,
            "middle",
            font_weight,
        )

    def set_color(self, color: str) -> "Modifier":
        self.color = color
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind!r})"


class OctaveMark(Modifier):
    """Register mark drawn above-right of the note glyph.

    Args:
        register: "kan" / 1 or "daikan" / 2. Otsu notes carry no mark.
        color: Color of the mark.
    """

    GLYPHS: ClassVar[MappingProxyType] = MappingProxyType({"kan": "甲", "daikan": "大"})
    REGISTERS: ClassVar[tuple[str, ...]] = ("otsu", "kan", "daikan")

    OFFSET_X: ClassVar[float] = constants.OCTAVE_MARK_OFFSET_X
    OFFSET_Y: ClassVar[float] = constants.OCTAVE_MARK_OFFSET_Y
    OFFSET: ClassVar[Point] = Point(x=OFFSET_X, y=OFFSET_Y)
    FONT_SIZE: ClassVar[int] = constants.OCTAVE_MARK_FONT_SIZE
    FONT_WEIGHT: ClassVar[int] = constants.OCTAVE_MARK_FONT_WEIGHT
    FONT_FAMILY: ClassVar[str] = constants.NOTE_FONT_FAMILY

    def __init__(self, register: str | int = "kan", color: str = constants.NOTE_COLOR):
        super().__init__(color)
        if isinstance(register, int) and not isinstance(register, bool):
            if not 1 <= register < len(self.REGISTERS):
                raise ValueError(
                    f"Octave mark index must be 1 (kan) or 2 (daikan), got {register}"
                )
            register = self.REGISTERS[register]
        if register not in self.GLYPHS:
            raise ValueError(f"No octave mark for register {register!r}")
        self.register = register

    @property
    def kind(self) -> str:
        return self.register

    @property
    def glyph(self) -> str:
        return self.GLYPHS[self.register]

    def render(self, surface, anchor_x, anchor_y):
        self._draw_glyph(
            surface,
            self.glyph,
            anchor_x,
            anchor_y,
            self.FONT_SIZE,
            self.FONT_WEIGHT,
            self.FONT_FAMILY,
        )

    def get_offset(self):
        return self.OFFSET

    def get_width(self):
        return self.FONT_SIZE * constants.GLYPH_WIDTH_RATIO

    def get_height(self):
        return self.FONT_SIZE


class AlterationMark(Modifier):
    """Meri/kari mark drawn to the left of the note glyph.

    Args:
        alteration: "meri", "chu-meri", "dai-meri" or "kari".
        color: Color of the mark.
    """

    GLYPHS: ClassVar[MappingProxyType] = MappingProxyType(
        {"meri": "メ", "chu-meri": "中", "dai-meri": "大", "kari": "カ"}
    )
    # 中 and 大 are full-width kanji and sit slightly further out
    OFFSETS: ClassVar[MappingProxyType] = MappingProxyType(
        {
            "meri": Point(x=-20, y=-6),
            "chu-meri": Point(x=-22, y=-6),
            "dai-meri": Point(x=-22, y=-6),
            "kari": Point(x=-20, y=-6),
        }
    )
    FONT_SIZE: ClassVar[int] = constants.ALTERATION_FONT_SIZE
    FONT_WEIGHT: ClassVar[int] = constants.ALTERATION_FONT_WEIGHT
    FONT_FAMILY: ClassVar[str] = constants.NOTE_FONT_FAMILY

    def __init__(self, alteration: str = "meri", color: str = constants.NOTE_COLOR):
        super().__init__(color)
        if alteration not in self.GLYPHS:
            raise ValueError(f"Unknown pitch alteration {alteration!r}")
        self.alteration = alteration

    @property
    def kind(self) -> str:
        return self.alteration

    @property
    def glyph(self) -> str:
        return self.GLYPHS[self.alteration]

    def render(self, surface, anchor_x, anchor_y):
        self._draw_glyph(
            surface,
            self.glyph,
            anchor_x,
            anchor_y,
            self.FONT_SIZE,
            self.FONT_WEIGHT,
            self.FONT_FAMILY,
        )

    def get_offset(self):
        return self.OFFSETS[self.alteration]

    def get_width(self):
        return self.FONT_SIZE * constants.GLYPH_WIDTH_RATIO

    def get_height(self):
        return self.FONT_SIZE


class TechniqueStyle(NamedTuple):
    """Fixed geometry of one technique mark.

    `glyph` is None for marks drawn with line strokes.
    """

    glyph: str | None
    offset: Point
    size: float
    width: float
    height: float


def _text_style(glyph: str, x: float, y: float, size: float) -> TechniqueStyle:
    width = size * constants.GLYPH_WIDTH_RATIO * len(glyph)
    return TechniqueStyle(glyph, Point(x=x, y=y), size, width, size)


def _stroke_style(x: float, y: float, size: float) -> TechniqueStyle:
    return TechniqueStyle(None, Point(x=x, y=y), size, size, size)


class TechniqueMark(Modifier):
    """Performance technique mark.

    Text techniques (yuri, muraiki, korokoro) draw a glyph; attack and
    slide techniques (atari, uchi, suri, ori) draw short line strokes.

    Args:
        technique: One of `TechniqueMark.STYLES`.
        color: Color of the mark.
    """

    STYLES: ClassVar[MappingProxyType] = MappingProxyType(
        {
            "yuri": _text_style("〜", 22, -6, 14),  # vibrato
            "muraiki": _text_style("ム", 22, -6, 12),  # breathy attack
            "korokoro": _text_style("コロ", 26, -6, 10),  # flutter
            "atari": _stroke_style(-20, 8, 8),  # finger pop
            "uchi": _stroke_style(-20, -24, 8),  # strong attack
            "suri": _stroke_style(22, -6, 10),  # slide up
            "ori": _stroke_style(22, -6, 10),  # slide down
        }
    )
    STROKE_WIDTH: ClassVar[float] = 1.5

    def __init__(self, technique: str, color: str = constants.NOTE_COLOR):
        super().__init__(color)
        if technique not in self.STYLES:
            raise ValueError(f"Unknown technique {technique!r}")
        self.technique = technique

    @property
    def kind(self) -> str:
        return self.technique

    @property
    def style(self) -> TechniqueStyle:
        return self.STYLES[self.technique]

    def render(self, surface, anchor_x, anchor_y):
        style = self.style
        if style.glyph is not None:
            self._draw_glyph(
                surface, style.glyph, anchor_x, anchor_y, style.size, "normal"
            )
            return

        cx = anchor_x + style.offset.x
        cy = anchor_y + style.offset.y
        half = style.size / 2
        if self.technique == "atari":
            # ">" pointing at the note
            self._stroke(surface, cx - half, cy - half, cx + half, cy)
            self._stroke(surface, cx + half, cy, cx - half, cy + half)
        elif self.technique == "uchi":
            # "^" above-left of the note
            self._stroke(surface, cx - half, cy + half, cx, cy - half)
            self._stroke(surface, cx, cy - half, cx + half, cy + half)
        elif self.technique == "suri":
            self._stroke(surface, cx - half, cy + half, cx + half, cy - half)
        else:  # ori
            self._stroke(surface, cx - half, cy - half, cx + half, cy + half)

    def _stroke(self, surface, x1, y1, x2, y2) -> None:
        surface.draw_line(x1, y1, x2, y2, self.color, self.STROKE_WIDTH)

    def get_offset(self):
        return self.style.offset

    def get_width(self):
        return self.style.width

    def get_height(self):
        return self.style.height


class DurationDot(Modifier):
    """Dot marking a dotted duration.

    The dot has no layout box of its own: it does not widen the note's
    bounding box. Instead the column layout adds `EXTRA_SPACING` below a
    dotted note, and the dot is drawn inside that gap.
    """

    kind = "dot"

    OFFSET: ClassVar[Point] = Point(x=0, y=0)
    EXTRA_SPACING: ClassVar[float] = constants.DURATION_DOT_EXTRA_SPACING
    RADIUS: ClassVar[float] = constants.DURATION_DOT_RADIUS

    def render(self, surface, anchor_x, anchor_y):
        surface.draw_circle(
            anchor_x, anchor_y + self.EXTRA_SPACING / 2, self.RADIUS, fill=self.color
        )

    def get_offset(self):
        return self.OFFSET

    def get_width(self):
        return 0.0

    def get_height(self):
        return 0.0


MODIFIER_TYPES = (OctaveMark, AlterationMark, TechniqueMark, DurationDot)
