from kinko_notation.models import (
    ColumnInfo,
    ColumnLayout,
    DrawCall,
    NotePosition,
    RenderResult,
)


def test_columnlayout_positions_flatten_in_order():
    layout = ColumnLayout(
        total_columns=2,
        columns=[
            ColumnInfo(
                column_index=0,
                x_position=50,
                note_start_index=0,
                note_end_index=1,
                note_positions=[NotePosition(note_index=0, row=0, x=50, y=34)],
            ),
            ColumnInfo(
                column_index=1,
                x_position=185,
                note_start_index=1,
                note_end_index=2,
                note_positions=[NotePosition(note_index=1, row=0, x=185, y=34)],
            ),
        ],
    )
    assert [p.note_index for p in layout.positions] == [0, 1]


def test_renderresult_default():
    r = RenderResult()
    assert r.notes == []
    assert r.layout.total_columns == 0
    assert r.layout.extent is None


def test_drawcall_item_access():
    call = DrawCall(primitive="circle", params={"x": 1, "radius": 2.5})
    assert call["radius"] == 2.5
