"""Models for the results of the layout and render stages.

The layout stage assigns positions to notes and summarises them as a
`ColumnLayout`. The render pass bundles the notes it drew together with that
layout in a `RenderResult`, which hosts use to size their canvas or to hit
test individual notes.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kinko_notation.models.core_models import BoundingBox


class NotePosition(BaseModel):
    """Position assigned to one note.

    Attributes:
        note_index: Index of the note in the laid-out sequence.
        row: Row of the note inside its column.
        x: Horizontal centre of the glyph.
        y: Baseline of the glyph.
    """

    note_index: int = Field(..., ge=0)
    row: int = Field(..., ge=0)
    x: float
    y: float


class ColumnInfo(BaseModel):
    """One column of the layout.

    Attributes:
        column_index: Zero-based column index, left to right.
        x_position: Shared x of every note in the column.
        note_start_index: First note index in the column (inclusive).
        note_end_index: Last note index in the column (exclusive).
        note_positions: Positions of the notes in the column, top to bottom.
    """

    column_index: int = Field(..., ge=0)
    x_position: float
    note_start_index: int = Field(..., ge=0)
    note_end_index: int = Field(..., ge=0)
    note_positions: list[NotePosition] = Field(default_factory=list)


class ColumnLayout(BaseModel):
    """Complete layout of a note sequence.

    Attributes:
        total_columns: Number of columns used.
        start_x: X of the first column.
        start_y: Baseline of the first row (the top margin).
        column_width: Width allocated to each column.
        column_spacing: Gap between columns.
        columns: Per-column information.
        extent: Union of all note boxes, or None for an empty layout.
    """

    total_columns: int = Field(0, ge=0)
    start_x: float = 0.0
    start_y: float = 0.0
    column_width: float = 0.0
    column_spacing: float = 0.0
    columns: list[ColumnInfo] = Field(default_factory=list)
    extent: BoundingBox | None = None

    @property
    def positions(self) -> list[NotePosition]:
        """Every note position in sequence order."""
        return [pos for column in self.columns for pos in column.note_positions]


class RenderResult(BaseModel):
    """Outcome of one render pass.

    Attributes:
        notes: The `ShakuNote` objects that were laid out and drawn.
        layout: The layout that was applied to them.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    notes: list[Any] = Field(default_factory=list, description="Rendered notes")
    layout: ColumnLayout = Field(default_factory=ColumnLayout)
