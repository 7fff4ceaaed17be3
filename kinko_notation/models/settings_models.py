"""Configuration models for the render pass.

This module defines Pydantic models for everything a host can configure
when rendering a score: display toggles, the color theme, note typography
and the column layout. The models provide validation and defaults drawn
from `kinko_notation.constants`.
"""

from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from kinko_notation import constants

Theme = Literal["light", "dark"]


class ThemeColors(BaseModel):
    """Colors used by one display theme.

    Attributes:
        note: Color of note glyphs, rests and their modifiers.
        debug_label: Color of debug labels.
        background: Canvas background color.
    """

    model_config = ConfigDict(frozen=True)

    note: str = Field(constants.NOTE_COLOR, description="Note and modifier color")
    debug_label: str = Field("#999", description="Debug label color")
    background: str = Field("#fff", description="Canvas background color")


# Read-only: every render pass shares these
THEMES: MappingProxyType = MappingProxyType(
    {
        "light": ThemeColors(),
        "dark": ThemeColors(note="#e8e8e8", debug_label="#888", background="#1e1e1e"),
    }
)


class LayoutParams(BaseModel):
    """Column layout parameters.

    The defaults are the fixed layout constants. The top margin is not a
    field: it is derived from the octave mark geometry so that a mark on the
    first row is never clipped.

    Attributes:
        column_width: Width allocated to each column.
        column_spacing: Horizontal gap between neighbouring columns.
        notes_per_column: Number of notes before a new column starts.
        vertical_spacing: Baseline-to-baseline distance between notes.
        duration_dot_extra_spacing: Extra gap after a note with a duration dot.
    """

    column_width: float = Field(
        constants.COLUMN_WIDTH, gt=0, description="Width of each column"
    )
    column_spacing: float = Field(
        constants.COLUMN_SPACING, ge=0, description="Gap between columns"
    )
    notes_per_column: int = Field(
        constants.NOTES_PER_COLUMN, ge=1, description="Column capacity"
    )
    vertical_spacing: float = Field(
        constants.NOTE_VERTICAL_SPACING, gt=0, description="Baseline spacing"
    )
    duration_dot_extra_spacing: float = Field(
        constants.DURATION_DOT_EXTRA_SPACING,
        ge=0,
        description="Extra spacing after a dotted note",
    )

    @property
    def top_margin(self) -> float:
        """Y of the first baseline in every column."""
        return float(constants.TOP_MARGIN)

    @property
    def column_pitch(self) -> float:
        """Distance between the x origins of two neighbouring columns."""
        return self.column_width + self.column_spacing


class RenderOptions(BaseModel):
    """Display configuration for a render pass.

    Changing any option means re-running the whole pass; notes are never
    patched in place.

    Attributes:
        show_debug_labels: Draw a small romaji label next to each note.
        show_octave_marks: Keep octave marks (甲/大) on the notes.
        theme: Color theme name ("light" or "dark").
        note_color: Explicit note color overriding the theme.
        note_font_size: Font size of note glyphs in pixels (8-128, default 28).
        note_font_weight: CSS font weight of note glyphs (100-900, default 400).
        note_font_family: Font family of note glyphs.
        layout: Column layout parameters.
    """

    show_debug_labels: bool = Field(False, description="Draw debug labels")
    show_octave_marks: bool = Field(True, description="Draw octave marks")
    theme: Theme = Field("light", description="Color theme")
    note_color: str | None = Field(None, description="Override the theme note color")
    note_font_size: float = Field(28, ge=8, le=128, description="Note font size")
    note_font_weight: int = Field(
        constants.NOTE_FONT_WEIGHT, ge=100, le=900, description="Note font weight"
    )
    note_font_family: str = Field(
        constants.NOTE_FONT_FAMILY, description="Note font family"
    )
    layout: LayoutParams = Field(
        default_factory=LayoutParams, description="Column layout parameters"
    )

    @property
    def colors(self) -> ThemeColors:
        """Theme colors with the note color override applied."""
        colors = THEMES[self.theme]
        if self.note_color is not None:
            return colors.model_copy(update={"note": self.note_color})
        return colors
