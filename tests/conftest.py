from __future__ import annotations

import io
from typing import Sequence

import pytest
from PIL import Image

from glyph_strip.pixels import PixelBuffer

BACKGROUND = (0, 0, 0, 255)
INK = (255, 255, 255, 255)


def make_strip(widths: Sequence[int], height: int = 4, trailing: int = 0) -> Image.Image:
    """Draw ink runs of the given widths, each followed by one gutter column."""
    total = sum(width + 1 for width in widths) + trailing
    image = Image.new("RGBA", (total, height), BACKGROUND)
    x = 0
    for index, width in enumerate(widths):
        # vary the ink per glyph so packed columns can be told apart
        color = (index * 10 % 256, 255, 255, 255)
        for dx in range(width):
            for y in range(height):
                image.putpixel((x + dx, y), color)
        x += width + 1
    return image


def strip_buffer(widths: Sequence[int], height: int = 4, trailing: int = 0) -> PixelBuffer:
    return PixelBuffer.from_image(make_strip(widths, height, trailing))


def png_bytes(image: Image.Image) -> bytes:
    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()


@pytest.fixture
def strip_png() -> bytes:
    return png_bytes(make_strip([5, 5], height=6))
