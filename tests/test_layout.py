import numpy as np
import pytest

from kinko_notation import constants
from kinko_notation.layout import compute_positions, layout_notes
from kinko_notation.models import LayoutParams
from kinko_notation.modifiers import DurationDot, OctaveMark
from kinko_notation.notes import ShakuNote


def make_notes(n, dotted=()):
    notes = [ShakuNote("ro") for _ in range(n)]
    for i in dotted:
        notes[i].add_modifier(DurationDot())
    return notes


def test_top_margin_derives_from_octave_mark():
    assert constants.TOP_MARGIN == abs(OctaveMark.OFFSET_Y) + OctaveMark.FONT_SIZE == 34


def test_first_column(eleven_notes):
    layout_notes(eleven_notes)
    assert eleven_notes[0].get_position() == (50, 34)
    assert eleven_notes[9].get_position() == (50, 34 + 9 * 44)


def test_eleventh_note_starts_new_column(eleven_notes):
    layout = layout_notes(eleven_notes)
    x_prev = eleven_notes[0].get_position()[0]
    x, y = eleven_notes[10].get_position()
    assert x == pytest.approx(x_prev + 135)
    assert y == pytest.approx(34)
    assert layout.total_columns == 2
    assert layout.columns[1].note_positions[0].row == 0
    assert (layout.columns[1].note_start_index, layout.columns[1].note_end_index) == (
        10,
        11,
    )


def test_dotted_note_adds_extra_gap():
    notes = make_notes(3, dotted=[0])
    layout_notes(notes)
    ys = [n.get_position()[1] for n in notes]
    assert ys[1] - ys[0] == pytest.approx(56)
    assert ys[2] - ys[1] == pytest.approx(44)


def test_dot_spacing_stays_in_its_column():
    notes = make_notes(12, dotted=[3])
    layout_notes(notes)
    assert notes[10].get_position()[1] == pytest.approx(34)
    assert notes[11].get_position()[1] == pytest.approx(78)
    assert notes[9].get_position()[1] == pytest.approx(34 + 9 * 44 + 12)


def test_empty_layout():
    layout = layout_notes([])
    assert layout.total_columns == 0
    assert layout.columns == []
    assert layout.extent is None


def test_many_columns():
    layout = layout_notes(make_notes(25))
    assert layout.total_columns == 3
    last = layout.columns[-1]
    assert (last.note_start_index, last.note_end_index) == (20, 25)
    assert last.x_position == pytest.approx(50 + 2 * 135)
    assert len(layout.positions) == 25


def test_custom_params():
    params = LayoutParams(notes_per_column=4, column_width=60, column_spacing=10)
    notes = make_notes(6)
    layout = layout_notes(notes, params)
    assert notes[5].get_position() == (100, 78)
    assert layout.start_x == 30
    assert layout.start_y == 34


def test_layout_is_deterministic():
    first, second = make_notes(15, dotted=[2, 7]), make_notes(15, dotted=[2, 7])
    a, b = layout_notes(first), layout_notes(second)
    assert a == b
    assert [n.get_position() for n in first] == [n.get_position() for n in second]


def test_extent_covers_every_note():
    notes = make_notes(11)
    notes[0].add_modifier(OctaveMark("kan"))
    layout = layout_notes(notes)
    assert all(layout.extent.contains(n.get_bbox()) for n in notes)
    # the octave mark on the first row stays inside the canvas
    assert layout.extent.y >= 0


def test_compute_positions_arrays():
    cols, rows, xs, ys = compute_positions([False, True, False], LayoutParams())
    np.testing.assert_array_equal(cols, [0, 0, 0])
    np.testing.assert_array_equal(rows, [0, 1, 2])
    np.testing.assert_allclose(xs, [50, 50, 50])
    np.testing.assert_allclose(ys, [34, 78, 134])
