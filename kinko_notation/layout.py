"""Column layout for Kinko-ryū scores.

Notes are read top to bottom in fixed-capacity columns. This module only
assigns positions; it never draws.
"""

import logging
from functools import reduce

import numpy as np

from kinko_notation.models import ColumnInfo, ColumnLayout, LayoutParams, NotePosition
from kinko_notation.notes import ShakuNote

logger = logging.getLogger(__name__)


def compute_positions(
    dotted: list[bool], params: LayoutParams
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Compute column, row, x and y for a sequence of notes.

    Args:
        dotted: Whether each note carries a duration dot.
        params: Layout parameters.

    Returns:
        Four 1D arrays of equal length: column index, row index, x and y.
        A dotted note pushes every later note in the same column down by
        `params.duration_dot_extra_spacing`.
    """
    n = len(dotted)
    capacity = params.notes_per_column
    idx = np.arange(n)
    cols = idx // capacity
    rows = idx % capacity

    dots = np.asarray(dotted, dtype=float) * params.duration_dot_extra_spacing
    # extra spacing accumulated before each note, restarted at each column top
    prior = np.cumsum(dots) - dots
    offset = prior - prior[cols * capacity] if n else prior

    xs = params.column_width / 2 + cols * params.column_pitch
    ys = params.top_margin + rows * params.vertical_spacing + offset
    return cols, rows, xs, ys


def layout_notes(
    notes: list[ShakuNote], params: LayoutParams | None = None
) -> ColumnLayout:
    """Position notes in columns of `params.notes_per_column`.

    Note `i` goes to column `i // capacity`, row `i % capacity`, at
    `x = column_width / 2 + column * (column_width + column_spacing)` and
    `y = top_margin + row * vertical_spacing` plus the extra spacing of
    earlier dotted notes in its column. Only `set_position` is called on the
    notes.

    Args:
        notes: Notes to position, in reading order.
        params: Layout parameters; the default constants when None.

    Returns:
        ColumnLayout describing every column and the overall extent.
    """
    params = params or LayoutParams()
    capacity = params.notes_per_column
    cols, rows, xs, ys = compute_positions(
        [note.has_duration_dot() for note in notes], params
    )

    for note, x, y in zip(notes, xs, ys):
        note.set_position(float(x), float(y))

    total_columns = -(-len(notes) // capacity)
    columns = []
    for column in range(total_columns):
        start = column * capacity
        end = min(start + capacity, len(notes))
        columns.append(
            ColumnInfo(
                column_index=column,
                x_position=float(xs[start]),
                note_start_index=start,
                note_end_index=end,
                note_positions=[
                    NotePosition(
                        note_index=i, row=int(rows[i]), x=float(xs[i]), y=float(ys[i])
                    )
                    for i in range(start, end)
                ],
            )
        )

    extent = (
        reduce(lambda acc, box: acc.union(box), (n.get_bbox() for n in notes))
        if notes
        else None
    )

    logger.debug(
        "Laid out %d notes in %d columns (capacity %d)",
        len(notes),
        total_columns,
        capacity,
    )
    return ColumnLayout(
        total_columns=total_columns,
        start_x=params.column_width / 2,
        start_y=params.top_margin,
        column_width=params.column_width,
        column_spacing=params.column_spacing,
        columns=columns,
        extent=extent,
    )
