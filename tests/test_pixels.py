from __future__ import annotations

import pytest
from PIL import Image

from glyph_strip.errors import GeometryError
from glyph_strip.pixels import PixelBuffer


def test_buffer_length_must_match_geometry():
    with pytest.raises(GeometryError):
        PixelBuffer(2, 2, 4, bytes(15))


def test_column_reads_top_to_bottom():
    image = Image.new("RGBA", (2, 2))
    image.putpixel((1, 0), (1, 2, 3, 4))
    image.putpixel((1, 1), (5, 6, 7, 8))
    buffer = PixelBuffer.from_image(image)

    assert buffer.column(1) == bytes((1, 2, 3, 4, 5, 6, 7, 8))
    assert buffer.pixel(1, 1) == bytes((5, 6, 7, 8))
    with pytest.raises(IndexError):
        buffer.column(2)


def test_from_columns_rebuilds_the_buffer():
    image = Image.new("RGBA", (3, 2), (9, 9, 9, 255))
    image.putpixel((2, 1), (1, 1, 1, 1))
    buffer = PixelBuffer.from_image(image)

    rebuilt = PixelBuffer.from_columns(buffer.columns(0, 3), buffer.height)
    assert rebuilt == buffer
    assert rebuilt.to_image().tobytes() == image.tobytes()


def test_from_image_adds_alpha():
    buffer = PixelBuffer.from_image(Image.new("RGB", (1, 1), (10, 20, 30)))
    assert buffer.data == bytes((10, 20, 30, 255))


def test_zero_size_buffer_has_no_image():
    with pytest.raises(GeometryError):
        PixelBuffer.blank(0, 3).to_image()
