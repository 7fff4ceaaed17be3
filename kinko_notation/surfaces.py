"""
Drawing surfaces for the Kinko notation renderer.

Notes and modifiers draw themselves through three primitives (text, circle,
line) on a `DrawingSurface`. The engine does not care whether the surface
produces vector markup or a raster image; this module ships three backends:

- `SvgSurface` builds a standalone SVG document with svgwrite.
- `MatplotlibSurface` draws onto a matplotlib Figure that can be saved as
  SVG, PDF or PNG.
- `RecordingSurface` keeps the primitive calls as `DrawCall` models.
"""

import logging
from abc import ABC, abstractmethod

import svgwrite
from matplotlib import patches
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from kinko_notation import constants
from kinko_notation.models import DrawCall, TextAnchor

logger = logging.getLogger(__name__)


class DrawingSurface(ABC):
    """Abstract 2D drawing surface.

    Coordinates are in surface units with the origin at the top-left and y
    growing downwards. Text is positioned by its baseline.
    """

    @abstractmethod
    def draw_text(
        self,
        content: str,
        x: float,
        y: float,
        font_size: float = 24,
        font_family: str = constants.NOTE_FONT_FAMILY,
        color: str = constants.NOTE_COLOR,
        anchor: TextAnchor = "middle",
        font_weight: int | str = 400,
    ) -> None:
        """Draw `content` with its baseline at `y`, anchored horizontally at `x`."""

    @abstractmethod
    def draw_circle(
        self,
        x: float,
        y: float,
        radius: float,
        fill: str | None = None,
        stroke: str | None = None,
        stroke_width: float = 1.0,
    ) -> None:
        """Draw a circle centred on (x, y); no fill when `fill` is None."""

    @abstractmethod
    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        stroke: str = constants.NOTE_COLOR,
        stroke_width: float = 1.0,
    ) -> None:
        """Draw a straight line segment."""


class RecordingSurface(DrawingSurface):
    """Surface that records every primitive instead of drawing it.

    Attributes:
        calls: Recorded draw calls in issue order.
    """

    def __init__(self) -> None:
        self.calls: list[DrawCall] = []

    def draw_text(
        self,
        content,
        x,
        y,
        font_size=24,
        font_family=constants.NOTE_FONT_FAMILY,
        color=constants.NOTE_COLOR,
        anchor="middle",
        font_weight=400,
    ):
        self.calls.append(
            DrawCall(
                primitive="text",
                params={
                    "content": content,
                    "x": x,
                    "y": y,
                    "font_size": font_size,
                    "font_family": font_family,
                    "color": color,
                    "anchor": anchor,
                    "font_weight": font_weight,
                },
            )
        )

    def draw_circle(self, x, y, radius, fill=None, stroke=None, stroke_width=1.0):
        self.calls.append(
            DrawCall(
                primitive="circle",
                params={
                    "x": x,
                    "y": y,
                    "radius": radius,
                    "fill": fill,
                    "stroke": stroke,
                    "stroke_width": stroke_width,
                },
            )
        )

    def draw_line(
        self, x1, y1, x2, y2, stroke=constants.NOTE_COLOR, stroke_width=1.0
    ):
        self.calls.append(
            DrawCall(
                primitive="line",
                params={
                    "x1": x1,
                    "y1": y1,
                    "x2": x2,
                    "y2": y2,
                    "stroke": stroke,
                    "stroke_width": stroke_width,
                },
            )
        )

    def of_type(self, primitive: str) -> list[DrawCall]:
        """Return the recorded calls of one primitive kind."""
        return [call for call in self.calls if call.primitive == primitive]

    def replay(self, surface: DrawingSurface) -> None:
        """Issue every recorded call again against another surface."""
        for call in self.calls:
            getattr(surface, f"draw_{call.primitive}")(**call.params)


def _num(value: float) -> int | float:
    """Coordinate rounded to 3 decimals, as an int when it is whole."""
    value = round(float(value), 3)
    return int(value) if value.is_integer() else value


class SvgSurface(DrawingSurface):
    """Surface that builds an SVG document with svgwrite.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        background: Optional background fill drawn behind everything.
    """

    def __init__(
        self, width: float = 800, height: float = 600, background: str | None = None
    ):
        self.width = width
        self.height = height
        self.background = background
        w, h = _num(width), _num(height)
        self.drawing = svgwrite.Drawing(
            size=(w, h), viewBox=f"0 0 {w} {h}", debug=False
        )
        if background:
            self.drawing.add(self.drawing.rect((0, 0), (w, h), fill=background))
        # innermost container last; the drawing itself is never popped
        self._groups = [self.drawing]

    def _add(self, element) -> None:
        self._groups[-1].add(element)

    def draw_text(
        self,
        content,
        x,
        y,
        font_size=24,
        font_family=constants.NOTE_FONT_FAMILY,
        color=constants.NOTE_COLOR,
        anchor="middle",
        font_weight=400,
    ):
        self._add(
            self.drawing.text(
                content,
                insert=(_num(x), _num(y)),
                font_size=_num(font_size),
                font_family=font_family,
                font_weight=font_weight,
                fill=color,
                text_anchor=anchor,
            )
        )

    def draw_circle(self, x, y, radius, fill=None, stroke=None, stroke_width=1.0):
        extra = {}
        if stroke:
            extra = {"stroke": stroke, "stroke_width": _num(stroke_width)}
        self._add(
            self.drawing.circle(
                center=(_num(x), _num(y)),
                r=_num(radius),
                fill=fill or "none",
                **extra,
            )
        )

    def draw_line(
        self, x1, y1, x2, y2, stroke=constants.NOTE_COLOR, stroke_width=1.0
    ):
        self._add(
            self.drawing.line(
                (_num(x1), _num(y1)),
                (_num(x2), _num(y2)),
                stroke=stroke,
                stroke_width=_num(stroke_width),
            )
        )

    def open_group(self, class_name: str | None = None) -> None:
        """Start a `<g>` element; following primitives are nested in it."""
        group = self.drawing.g(class_=class_name) if class_name else self.drawing.g()
        self._add(group)
        self._groups.append(group)

    def close_group(self) -> None:
        """Close the innermost open group."""
        if len(self._groups) == 1:
            logger.warning("close_group() called but no groups are open")
            return
        self._groups.pop()

    def to_svg(self) -> str:
        """Return the complete SVG document."""
        return self.drawing.tostring()

    def save(self, filename) -> None:
        """Write the SVG document to `filename`."""
        self.drawing.saveas(str(filename))


_ANCHOR_TO_HA = {"start": "left", "middle": "center", "end": "right"}


class MatplotlibSurface(DrawingSurface):
    """Surface that draws onto a matplotlib Figure.

    One surface unit maps to one pixel at the figure's dpi, so a score laid
    out for an SVG canvas renders at the same size here.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        dpi: Raster resolution used to convert pixels to inches (default 100).
        background: Figure background color.
    """

    def __init__(
        self,
        width: float = 800,
        height: float = 600,
        dpi: int = 100,
        background: str = "#fff",
    ):
        self.width = width
        self.height = height
        self.dpi = dpi
        self.figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.figure.patch.set_facecolor(background)
        self.ax = self.figure.add_axes((0, 0, 1, 1))
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)  # y grows downwards like SVG
        self.ax.axis("off")

    def _points(self, pixels: float) -> float:
        """Convert a length in pixels to typographic points."""
        return pixels * 72.0 / self.dpi

    def draw_text(
        self,
        content,
        x,
        y,
        font_size=24,
        font_family=constants.NOTE_FONT_FAMILY,
        color=constants.NOTE_COLOR,
        anchor="middle",
        font_weight=400,
    ):
        families = [name.strip() for name in font_family.split(",") if name.strip()]
        self.ax.text(
            x,
            y,
            content,
            fontsize=self._points(font_size),
            fontfamily=families,
            fontweight=font_weight,
            color=color,
            ha=_ANCHOR_TO_HA[anchor],
            va="baseline",
        )

    def draw_circle(self, x, y, radius, fill=None, stroke=None, stroke_width=1.0):
        self.ax.add_patch(
            patches.Circle(
                (x, y),
                radius,
                fill=fill is not None,
                facecolor=fill if fill is not None else "none",
                edgecolor=stroke if stroke is not None else "none",
                linewidth=self._points(stroke_width) if stroke else 0,
            )
        )

    def draw_line(
        self, x1, y1, x2, y2, stroke=constants.NOTE_COLOR, stroke_width=1.0
    ):
        self.ax.add_line(
            Line2D(
                [x1, x2],
                [y1, y2],
                color=stroke,
                linewidth=self._points(stroke_width),
                solid_capstyle="round",
            )
        )

    def save(self, target, format: str | None = None) -> None:
        """Save the figure to a path or file object (svg, pdf, png, ...)."""
        self.figure.savefig(target, format=format, dpi=self.dpi)
