import io
import logging
import xml.etree.ElementTree as ET

import pytest
from matplotlib.figure import Figure

from kinko_notation.surfaces import (
    MatplotlibSurface,
    RecordingSurface,
    SvgSurface,
    _num,
)

SVG = "http://www.w3.org/2000/svg"
NS = {"svg": SVG}


def parse(svg):
    return ET.fromstring(svg)


def draw_sample(surface):
    surface.draw_text("ロ", 50, 34, 28, "serif", "#000", "middle", 400)
    surface.draw_circle(50, 40, 2.5, fill="#000")
    surface.draw_line(0, 0, 10, 10, "#000", 1.5)


def test_recording_surface(recording_surface):
    draw_sample(recording_surface)
    assert [c.primitive for c in recording_surface.calls] == ["text", "circle", "line"]
    assert recording_surface.of_type("circle")[0]["radius"] == 2.5


def test_replay_reproduces_calls(recording_surface):
    draw_sample(recording_surface)
    copy = RecordingSurface()
    recording_surface.replay(copy)
    assert copy.calls == recording_surface.calls


@pytest.mark.parametrize(
    "value, expected", [(2.0, 2), (1.23456, 1.235), (-0.0001, 0), (12.5, 12.5)]
)
def test_num(value, expected):
    assert _num(value) == expected
    assert isinstance(_num(value), type(expected))


def test_svg_document():
    surface = SvgSurface(200, 100)
    draw_sample(surface)
    root = parse(surface.to_svg())
    assert root.tag == f"{{{SVG}}}svg"
    assert (root.get("width"), root.get("height")) == ("200", "100")
    assert root.get("viewBox") == "0 0 200 100"
    assert root.find("svg:rect", NS) is None

    text = root.find("svg:text", NS)
    assert text.text == "ロ"
    assert (text.get("x"), text.get("y"), text.get("font-size")) == ("50", "34", "28")
    assert text.get("text-anchor") == "middle"
    assert text.get("font-weight") == "400"

    circle = root.find("svg:circle", NS)
    assert (circle.get("cx"), circle.get("cy"), circle.get("r")) == ("50", "40", "2.5")
    assert circle.get("fill") == "#000"
    assert root.find("svg:line", NS).get("stroke-width") == "1.5"


def test_svg_escapes_text():
    surface = SvgSurface()
    surface.draw_text("<a&b>", 0, 0)
    svg = surface.to_svg()
    assert "&lt;a&amp;b&gt;" in svg
    assert parse(svg).find("svg:text", NS).text == "<a&b>"


def test_svg_hollow_circle():
    surface = SvgSurface()
    surface.draw_circle(1, 2, 3, stroke="#333", stroke_width=2)
    circle = parse(surface.to_svg()).find("svg:circle", NS)
    assert circle.get("fill") == "none"
    assert circle.get("stroke") == "#333"
    assert circle.get("stroke-width") == "2"


def test_svg_background_and_groups():
    surface = SvgSurface(10, 10, background="#1e1e1e")
    surface.open_group("kinko-score")
    surface.draw_line(0, 0, 1, 1)
    root = parse(surface.to_svg())
    rect = root.find("svg:rect", NS)
    assert (rect.get("width"), rect.get("height")) == ("10", "10")
    assert rect.get("fill") == "#1e1e1e"
    (group,) = root.findall("svg:g", NS)
    assert group.get("class") == "kinko-score"
    # primitives land inside the open group
    assert group.find("svg:line", NS) is not None
    assert root.find("svg:line", NS) is None


def test_svg_nested_groups():
    surface = SvgSurface()
    surface.open_group("outer")
    surface.open_group("inner")
    surface.draw_circle(0, 0, 1, fill="#000")
    surface.close_group()
    surface.draw_line(0, 0, 1, 1)
    outer = parse(surface.to_svg()).find("svg:g", NS)
    inner = outer.find("svg:g", NS)
    assert inner.get("class") == "inner"
    assert inner.find("svg:circle", NS) is not None
    assert outer.find("svg:line", NS) is not None


def test_svg_close_group_without_open_group(caplog):
    surface = SvgSurface()
    with caplog.at_level(logging.WARNING, logger="kinko_notation.surfaces"):
        surface.close_group()
    assert "no groups are open" in caplog.text
    assert parse(surface.to_svg()).find("svg:g", NS) is None


def test_svg_save(tmp_path):
    surface = SvgSurface(20, 20)
    surface.draw_text("ツ", 10, 14)
    target = tmp_path / "score.svg"
    surface.save(target)
    assert parse(target.read_bytes()).find("svg:text", NS).text == "ツ"


def test_matplotlib_surface_draws_artists():
    surface = MatplotlibSurface(200, 100, dpi=100)
    draw_sample(surface)
    assert isinstance(surface.figure, Figure)
    assert len(surface.ax.texts) == 1
    assert len(surface.ax.patches) == 1
    assert len(surface.ax.lines) == 1
    # 28 px at 100 dpi
    assert surface.ax.texts[0].get_fontsize() == pytest.approx(28 * 72 / 100)
    # y axis points down like the other surfaces
    assert surface.ax.get_ylim() == (100, 0)


@pytest.mark.parametrize("fmt, magic", [("svg", b"<svg"), ("png", b"\x89PNG")])
def test_matplotlib_surface_save(fmt, magic):
    surface = MatplotlibSurface(120, 80)
    surface.draw_line(0, 0, 120, 80)
    buf = io.BytesIO()
    surface.save(buf, format=fmt)
    assert magic in buf.getvalue()
