from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from conftest import strip_buffer
from glyph_strip.bmfont import FORMATS, to_text, to_xml
from glyph_strip.metrics import emit
from glyph_strip.repack import repack
from glyph_strip.segment import GlyphDescriptor, segment


@pytest.fixture
def metrics():
    buffer = strip_buffer([5, 5], height=6)
    packed = repack(buffer, segment(buffer, "AB", set("AB ")))
    return emit("pixel", buffer.height, buffer.width, packed.glyphs, "pixel.0123abcd.png")


def test_emit_fills_every_field(metrics):
    assert metrics.face == "pixel"
    assert metrics.size == metrics.line_height == metrics.base == 6
    assert (metrics.scale_w, metrics.scale_h) == (12, 6)
    assert metrics.pages == 1
    assert [char.id for char in metrics.chars] == [65, 66, 32]
    assert [char.x for char in metrics.chars] == [0, 6, 12]
    for char in metrics.chars:
        assert char.xadvance == char.width + 1
        assert (char.y, char.xoffset, char.yoffset, char.page) == (0, 0, 0, 0)
        assert char.height == 6


def test_emit_requires_packed_glyphs():
    glyph = GlyphDescriptor(id=65, source_x=0, width=3, height=4)
    with pytest.raises(ValueError):
        emit("face", 4, 10, [glyph], "tex.png")


def test_to_dict_is_plain_data(metrics):
    data = metrics.to_dict()
    assert data["texture"] == "pixel.0123abcd.png"
    assert data["pages"] == 1
    assert data["chars"][1]["xadvance"] == 6


def test_xml_layout(metrics):
    text = to_xml(metrics)
    assert text.startswith('<?xml version="1.0"?>\n<font>')

    root = ET.fromstring(text)
    assert root.find("info").attrib == {"face": "pixel", "size": "6"}
    assert root.find("common").attrib == {
        "lineHeight": "6",
        "base": "6",
        "scaleW": "12",
        "scaleH": "6",
        "pages": "1",
    }
    assert root.find("pages/page").attrib == {"id": "0", "file": "pixel.0123abcd.png"}
    chars = root.find("chars")
    assert chars.get("count") == "3"
    space = chars.findall("char")[-1].attrib
    assert space == {
        "id": "32",
        "x": "12",
        "y": "0",
        "width": "5",
        "height": "6",
        "xoffset": "0",
        "yoffset": "0",
        "xadvance": "6",
        "page": "0",
    }


def test_text_layout(metrics):
    lines = to_text(metrics).splitlines()

    assert lines[0] == 'info face="pixel" size=6'
    assert lines[1] == "common lineHeight=6 base=6 scaleW=12 scaleH=6 pages=1"
    assert lines[2] == 'page id=0 file="pixel.0123abcd.png"'
    assert lines[3] == "chars count=3"
    assert lines[4] == "char id=65 x=0 y=0 width=5 height=6 xoffset=0 yoffset=0 xadvance=6 page=0"
    assert len(lines) == 7


def test_formats_registry():
    assert set(FORMATS) == {"xml", "fnt"}
