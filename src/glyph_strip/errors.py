"""Exceptions raised while building a bitmap font from a glyph strip."""

from __future__ import annotations


class GlyphStripError(Exception):
    """Base class for every error raised by glyph_strip."""


class ConfigurationError(GlyphStripError, ValueError):
    """Options are malformed or select no glyph at all."""


class SegmentationExhausted(GlyphStripError):
    """The strip ran out of gutter columns before the character sequence did."""

    def __init__(self, char: str, index: int, start_x: int):
        super().__init__(
            f"no gutter column found for {char!r} (position {index}) scanning from x={start_x}"
        )
        self.char = char
        self.index = index
        self.start_x = start_x


class GeometryError(GlyphStripError, ValueError):
    """A pixel buffer has inconsistent or zero dimensions."""
