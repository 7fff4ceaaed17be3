import pytest

from kinko_notation.models import Point
from kinko_notation.modifiers import (
    MODIFIER_TYPES,
    AlterationMark,
    DurationDot,
    Modifier,
    OctaveMark,
    TechniqueMark,
)


def test_closed_variant_set():
    assert len(MODIFIER_TYPES) == 4
    assert all(issubclass(cls, Modifier) for cls in MODIFIER_TYPES)
    with pytest.raises(TypeError):
        Modifier()


def test_octave_mark_constants():
    assert OctaveMark.OFFSET_X == 18
    assert OctaveMark.OFFSET_Y == -22
    assert OctaveMark.FONT_SIZE == 12
    assert OctaveMark.FONT_WEIGHT == 500


@pytest.mark.parametrize(
    "register, glyph", [("kan", "甲"), (1, "甲"), ("daikan", "大"), (2, "大")]
)
def test_octave_mark_glyph(register, glyph):
    assert OctaveMark(register).glyph == glyph


@pytest.mark.parametrize("register", ["otsu", 0, 3, "high"])
def test_octave_mark_invalid(register):
    with pytest.raises(ValueError):
        OctaveMark(register)


@pytest.mark.parametrize("index", [0, 3, -1])
def test_octave_mark_index_message(index):
    with pytest.raises(ValueError, match=r"must be 1 \(kan\) or 2 \(daikan\)"):
        OctaveMark(index)


def test_octave_mark_render(recording_surface):
    OctaveMark("kan", color="#123").render(recording_surface, 100, 100)
    (call,) = recording_surface.calls
    assert call.primitive == "text"
    assert call["content"] == "甲"
    assert call["x"] == pytest.approx(118)
    assert call["y"] == pytest.approx(100 - 22 + 12 * 0.4)
    assert call["font_size"] == 12
    assert call["font_weight"] == 500
    assert call["color"] == "#123"


def test_octave_mark_bbox():
    box = OctaveMark("kan").get_bbox(0, 0)
    assert box.x == pytest.approx(18 - 4.8)
    assert box.y == pytest.approx(-28)
    assert box.width == pytest.approx(9.6)
    assert box.height == pytest.approx(12)


def test_geometry_is_shared_per_variant():
    a, b = OctaveMark("kan", color="red"), OctaveMark("daikan", color="blue")
    assert a.get_offset() == b.get_offset() == Point(x=18, y=-22)
    assert a.get_width() == b.get_width()
    # accessors leave state untouched
    a.get_offset()
    assert a.color == "red" and a.kind == "kan"


@pytest.mark.parametrize(
    "kind, glyph", [("meri", "メ"), ("chu-meri", "中"), ("dai-meri", "大"), ("kari", "カ")]
)
def test_alteration_mark(kind, glyph, recording_surface):
    mark = AlterationMark(kind)
    mark.render(recording_surface, 0, 0)
    (call,) = recording_surface.calls
    assert call["content"] == glyph
    assert call["font_size"] == 14
    assert call["font_weight"] == 500
    # drawn left of the note
    assert mark.get_offset().x < 0
    assert mark.get_bbox(0, 0).right < 0


def test_alteration_mark_invalid():
    with pytest.raises(ValueError):
        AlterationMark("sharp")


@pytest.mark.parametrize(
    "kind, glyph", [("yuri", "〜"), ("muraiki", "ム"), ("korokoro", "コロ")]
)
def test_text_technique(kind, glyph, recording_surface):
    TechniqueMark(kind).render(recording_surface, 50, 50)
    (call,) = recording_surface.calls
    assert call.primitive == "text"
    assert call["content"] == glyph
    assert call["font_weight"] == "normal"


@pytest.mark.parametrize(
    "kind, strokes", [("atari", 2), ("uchi", 2), ("suri", 1), ("ori", 1)]
)
def test_stroke_technique(kind, strokes, recording_surface):
    TechniqueMark(kind, color="#333").render(recording_surface, 50, 50)
    lines = recording_surface.of_type("line")
    assert len(lines) == strokes == len(recording_surface.calls)
    assert all(line["stroke"] == "#333" for line in lines)


def test_suri_rises_and_ori_falls(recording_surface):
    TechniqueMark("suri").render(recording_surface, 0, 0)
    TechniqueMark("ori").render(recording_surface, 0, 0)
    suri, ori = recording_surface.of_type("line")
    assert suri["y2"] < suri["y1"]
    assert ori["y2"] > ori["y1"]


def test_technique_invalid():
    with pytest.raises(ValueError):
        TechniqueMark("tremolo")


def test_duration_dot(recording_surface):
    dot = DurationDot(color="#111")
    assert dot.get_offset() == Point(x=0, y=0)
    assert dot.get_width() == 0 and dot.get_height() == 0
    assert DurationDot.EXTRA_SPACING == 12

    dot.render(recording_surface, 100, 100)
    (call,) = recording_surface.calls
    assert call.primitive == "circle"
    assert (call["x"], call["y"]) == (100, 106)
    assert call["radius"] == pytest.approx(2.5)
    assert call["fill"] == "#111"


def test_render_accepts_negative_anchor(recording_surface):
    for modifier in (OctaveMark("kan"), AlterationMark("meri"), DurationDot()):
        modifier.render(recording_surface, -40.5, -12.25)
    assert len(recording_surface.calls) == 3


def test_set_color_returns_modifier():
    mark = AlterationMark("kari")
    assert mark.set_color("#abc") is mark
    assert mark.color == "#abc"


@pytest.mark.parametrize(
    "modifier",
    [
        OctaveMark("kan"),
        OctaveMark("daikan"),
        AlterationMark("meri"),
        AlterationMark("dai-meri"),
        TechniqueMark("yuri"),
        TechniqueMark("korokoro"),
    ],
    ids=repr,
)
def test_text_marks_are_centred_on_their_box(modifier, recording_surface):
    modifier.render(recording_surface, 100, 100)
    (call,) = recording_surface.calls
    box = modifier.get_bbox(100, 100)
    assert call["x"] == pytest.approx(box.x + box.width / 2)
    # visual centre of the glyph sits 0.4 em above its baseline
    assert call["y"] - call["font_size"] * 0.4 == pytest.approx(box.y + box.height / 2)
