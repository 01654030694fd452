"""Decode source strips and encode packed atlases with Pillow."""

from __future__ import annotations

import io

from PIL import Image

from .errors import ConfigurationError
from .pixels import PixelBuffer

IMAGE_FORMATS = {
    "png": ("PNG", {"optimize": True}),
    "webp": ("WEBP", {"lossless": True, "exact": True, "quality": 100, "method": 6}),
}


def decode(data: bytes) -> PixelBuffer:
    """Decode any Pillow-readable image into an RGBA buffer."""
    with Image.open(io.BytesIO(data)) as image:
        return PixelBuffer.from_image(image.convert("RGBA"))


def encode(buffer: PixelBuffer, fmt: str = "png") -> bytes:
    """Losslessly encode ``buffer`` as ``png`` or ``webp``."""
    try:
        pil_format, params = IMAGE_FORMATS[fmt]
    except KeyError:
        raise ConfigurationError(
            f"unknown image format {fmt!r}, expected one of {sorted(IMAGE_FORMATS)}"
        ) from None
    out = io.BytesIO()
    buffer.to_image().save(out, format=pil_format, **params)
    return out.getvalue()
