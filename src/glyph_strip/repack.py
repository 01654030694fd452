"""Pack segmented glyphs edge to edge into a compact single-row atlas."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import GeometryError
from .pixels import PixelBuffer
from .segment import GlyphDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackResult:
    buffer: PixelBuffer
    glyphs: Tuple[GlyphDescriptor, ...]


def repack(source: PixelBuffer, glyphs: Sequence[GlyphDescriptor]) -> PackResult:
    """Copy every glyph's columns plus its trailing gutter into a new buffer.

    Each glyph occupies ``width + 1`` columns of the result and gets ``packed_x`` set
    to its first one.  Synthetic glyphs have no source pixels and are packed as
    transparent columns.  The inputs are left untouched.
    """
    blank = bytes(source.height * source.channels)
    columns: List[bytes] = []
    packed: List[GlyphDescriptor] = []

    for glyph in glyphs:
        packed.append(glyph.with_packed_x(len(columns)))
        span = glyph.width + 1
        if glyph.is_synthetic:
            columns.extend([blank] * span)
            continue
        end = glyph.source_x + glyph.width
        if glyph.width < 0 or end > source.width:
            raise GeometryError(
                f"glyph {glyph.char!r} spans x={glyph.source_x}..{end}, "
                f"outside a strip {source.width} wide"
            )
        columns.extend(source.columns(glyph.source_x, min(end + 1, source.width)))
        if end == source.width:
            columns.append(blank)

    logger.debug("packed %d glyphs into %d columns", len(packed), len(columns))
    buffer = PixelBuffer.from_columns(columns, source.height, source.channels)
    return PackResult(buffer=buffer, glyphs=tuple(packed))


def ensure_packable(result: PackResult) -> PackResult:
    """Reject a packed atlas that an image encoder could not represent."""
    if result.buffer.width == 0 or result.buffer.height == 0:
        raise GeometryError(
            f"packed atlas is {result.buffer.width}x{result.buffer.height}, nothing to encode"
        )
    return result
