"""The renderable note of a Kinko-ryū score.

A `ShakuNote` owns its glyph, position, typography and attached modifiers.
Its bounding box is computed lazily and cached; every geometric mutation
drops the cache.
"""

import logging

from kinko_notation import constants
from kinko_notation.models import BoundingBox, Duration, KinkoSymbol
from kinko_notation.modifiers import DurationDot, Modifier
from kinko_notation.pitch_mapper import SymbolLookupError, parse_note
from kinko_notation.surfaces import DrawingSurface

logger = logging.getLogger(__name__)

# Rest circle geometry relative to the note font size
REST_RADIUS_RATIO = 1 / 8
REST_MIN_STROKE_WIDTH = 1.5
REST_STROKE_DIVISOR = 1.9


class ShakuNote:
    """A single note (or rest) with its modifiers.

    The anchor is (x, y): x is the horizontal centre of the glyph and y is
    its baseline. Modifiers are positioned relative to that anchor.

    Args:
        symbol: Romaji, kana or reference pitch of the note. When it does not
            resolve to a base symbol, the text itself is drawn as the glyph.
        x: Horizontal centre of the glyph.
        y: Baseline of the glyph.
        duration: Duration code.
        font_size: Glyph font size in pixels.
        font_weight: Glyph font weight.
        font_family: Glyph font family.
        color: Color of the glyph (modifiers keep their own color).
        modifiers: Modifiers to attach, in drawing order.
        is_rest: Draw a rest circle instead of a glyph.
        octave: Register index (0 = otsu, 1 = kan, 2 = daikan). Only used for
            labelling; the octave mark itself is a modifier.
    """

    def __init__(
        self,
        symbol: str,
        x: float = 0.0,
        y: float = 0.0,
        duration: Duration = "q",
        font_size: float = constants.NOTE_FONT_SIZE,
        font_weight: int | str = constants.NOTE_FONT_WEIGHT,
        font_family: str = constants.NOTE_FONT_FAMILY,
        color: str = constants.NOTE_COLOR,
        modifiers: list[Modifier] | None = None,
        is_rest: bool = False,
        octave: int = 0,
    ):
        self.symbol = symbol
        self.x = x
        self.y = y
        self.duration = duration
        self.font_size = font_size
        self.font_weight = font_weight
        self.font_family = font_family
        self.color = color
        self.is_rest = is_rest
        self.octave = octave
        self.modifiers: list[Modifier] = list(modifiers or [])

        self.symbol_info: KinkoSymbol | None = None
        self.kana = symbol
        if not is_rest:
            try:
                self.symbol_info = parse_note(symbol)
                self.kana = self.symbol_info.kana
            except SymbolLookupError:
                logger.warning("Unknown note symbol %r, drawing it as-is", symbol)

        self._bbox: BoundingBox | None = None

    def __repr__(self) -> str:
        label = "rest" if self.is_rest else self.kana
        return f"ShakuNote({label!r}, x={self.x}, y={self.y})"

    def _invalidate(self) -> None:
        self._bbox = None

    # Drawing

    def render(self, surface: DrawingSurface) -> None:
        """Draw the glyph (or rest) and then every modifier in order."""
        if self.is_rest:
            radius = self.font_size * REST_RADIUS_RATIO
            surface.draw_circle(
                self.x,
                self.y - self.font_size * constants.GLYPH_CENTER_RATIO,
                radius,
                fill=None,
                stroke=self.color,
                stroke_width=max(REST_MIN_STROKE_WIDTH, radius / REST_STROKE_DIVISOR),
            )
        else:
            surface.draw_text(
                self.kana,
                self.x,
                self.y,
                self.font_size,
                self.font_family,
                self.color,
                "middle",
                self.font_weight,
            )

        for modifier in self.modifiers:
            modifier.render(surface, self.x, self.y)

        self._invalidate()

    # Modifiers

    def add_modifier(self, modifier: Modifier) -> "ShakuNote":
        self.modifiers.append(modifier)
        self._invalidate()
        return self

    def add_modifiers(self, modifiers: list[Modifier]) -> "ShakuNote":
        self.modifiers.extend(modifiers)
        self._invalidate()
        return self

    def set_modifiers(self, modifiers: list[Modifier]) -> "ShakuNote":
        """Replace all attached modifiers."""
        self.modifiers = list(modifiers)
        self._invalidate()
        return self

    def get_modifiers(self) -> list[Modifier]:
        """Return a copy of the attached modifiers."""
        return list(self.modifiers)

    def has_duration_dot(self) -> bool:
        return any(isinstance(m, DurationDot) for m in self.modifiers)

    # Geometry

    def get_bbox(self) -> BoundingBox:
        """Bounding box of the glyph and all modifiers.

        The glyph box is `0.8 * font_size` wide and `font_size` tall with its
        bottom on the baseline. Each modifier box is centred on the anchor
        plus the modifier's offset. The result is cached until the next
        geometric change.
        """
        if self._bbox is None:
            width = self.font_size * constants.GLYPH_WIDTH_RATIO
            bbox = BoundingBox(
                x=self.x - width / 2,
                y=self.y - self.font_size,
                width=width,
                height=self.font_size,
            )
            for modifier in self.modifiers:
                bbox = bbox.union(modifier.get_bbox(self.x, self.y))
            self._bbox = bbox
        return self._bbox

    def get_width(self) -> float:
        return self.get_bbox().width

    def get_height(self) -> float:
        return self.get_bbox().height

    def set_position(self, x: float, y: float) -> "ShakuNote":
        self.x = x
        self.y = y
        self._invalidate()
        return self

    def get_position(self) -> tuple[float, float]:
        return self.x, self.y

    def set_font_size(self, font_size: float) -> "ShakuNote":
        self.font_size = font_size
        self._invalidate()
        return self

    def set_font_weight(self, font_weight: int | str) -> "ShakuNote":
        self.font_weight = font_weight
        self._invalidate()
        return self

    def set_font_family(self, font_family: str) -> "ShakuNote":
        self.font_family = font_family
        self._invalidate()
        return self

    # Non-geometric state

    def set_color(self, color: str) -> "ShakuNote":
        self.color = color
        return self

    def set_duration(self, duration: Duration) -> "ShakuNote":
        self.duration = duration
        return self

    def get_duration(self) -> Duration:
        return self.duration

    def get_kana(self) -> str:
        """Glyph drawn for the note (the raw input when it did not resolve)."""
        return self.kana

    def get_symbol_info(self) -> KinkoSymbol | None:
        return self.symbol_info

    def get_octave(self) -> int:
        return self.octave
