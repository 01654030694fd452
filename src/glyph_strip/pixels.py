"""Raw pixel buffers exchanged between the decoder, the segmenter and the repacker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from PIL import Image

from .errors import GeometryError

CHANNELS = 4


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major, interleaved pixel data (RGBA unless stated otherwise)."""

    width: int
    height: int
    channels: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.channels <= 0:
            raise GeometryError(
                f"invalid buffer geometry {self.width}x{self.height}x{self.channels}"
            )
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise GeometryError(
                f"buffer holds {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height}x{self.channels}"
            )

    @classmethod
    def blank(cls, width: int, height: int, channels: int = CHANNELS) -> "PixelBuffer":
        return cls(width, height, channels, bytes(width * height * channels))

    @classmethod
    def from_columns(
        cls, columns: Sequence[bytes], height: int, channels: int = CHANNELS
    ) -> "PixelBuffer":
        """Assemble a buffer from column byte strings as returned by :meth:`column`."""
        stride = channels
        out = bytearray()
        for y in range(height):
            start = y * stride
            for col in columns:
                out += col[start:start + stride]
        return cls(len(columns), height, channels, bytes(out))

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        width, height = image.size
        return cls(width, height, CHANNELS, image.tobytes())

    def to_image(self) -> Image.Image:
        if self.channels != CHANNELS:
            raise GeometryError(f"cannot build an RGBA image from {self.channels} channels")
        if self.width == 0 or self.height == 0:
            raise GeometryError(f"cannot build an image of size {self.width}x{self.height}")
        return Image.frombytes("RGBA", (self.width, self.height), self.data)

    @property
    def row_length(self) -> int:
        return self.width * self.channels

    def pixel(self, x: int, y: int) -> bytes:
        offset = y * self.row_length + x * self.channels
        return self.data[offset:offset + self.channels]

    def column(self, x: int) -> bytes:
        """Channel bytes of every pixel in column ``x``, top to bottom."""
        if not 0 <= x < self.width:
            raise IndexError(f"column {x} outside 0..{self.width - 1}")
        ch = self.channels
        row = self.row_length
        data = self.data
        return b"".join(
            data[y * row + x * ch:y * row + (x + 1) * ch] for y in range(self.height)
        )

    def columns(self, x0: int, x1: int) -> List[bytes]:
        return [self.column(x) for x in range(x0, x1)]
