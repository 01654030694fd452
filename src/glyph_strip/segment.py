"""Glyph segmentation: find each character's column run in a glyph strip.

A strip is read left to right.  Characters are separated by gutter columns whose
pixels all equal the background sentinel, opaque black ``(0, 0, 0, 0xFF)``.  The
declared character sequence is the only ground truth for which run belongs to
which character, so every declared character consumes its run even when it is
filtered out of the charset.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Collection, Iterable, List, Optional

from .charset import SPACE, char_sequence, js_round
from .errors import SegmentationExhausted
from .pixels import PixelBuffer

logger = logging.getLogger(__name__)

BACKGROUND = bytes((0x00, 0x00, 0x00, 0xFF))
SYNTHETIC_SOURCE_X = -1


@dataclass(frozen=True)
class GlyphDescriptor:
    id: int
    source_x: int
    width: int
    height: int
    packed_x: Optional[int] = None

    @property
    def char(self) -> str:
        return chr(self.id)

    @property
    def is_synthetic(self) -> bool:
        """True for glyphs with no pixels in the source strip (the synthesized space)."""
        return self.source_x < 0

    def with_packed_x(self, packed_x: int) -> "GlyphDescriptor":
        return replace(self, packed_x=packed_x)


def is_empty_column(buffer: PixelBuffer, x: int, background: bytes = BACKGROUND) -> bool:
    return buffer.column(x) == background * buffer.height


def _find_gutter(
    buffer: PixelBuffer,
    start: int,
    ignore_columns: Collection[int],
    background: bytes,
) -> Optional[int]:
    for x in range(start, buffer.width):
        if x in ignore_columns:
            continue
        if is_empty_column(buffer, x, background):
            return x
    return None


def segment(
    buffer: PixelBuffer,
    chars: Iterable[str],
    charset: Collection[str],
    ignore_columns: Collection[int] = (),
    strict: bool = False,
    background: bytes = BACKGROUND,
) -> List[GlyphDescriptor]:
    """Return descriptors for the retained characters in detection order.

    When the strip runs out of gutters the remaining characters are dropped with a
    warning, or :class:`SegmentationExhausted` is raised if ``strict`` is set.
    A space is synthesized at the end when it is in ``charset`` but not in ``chars``.
    """
    if len(background) != buffer.channels:
        raise ValueError(
            f"background sentinel has {len(background)} channels, buffer has {buffer.channels}"
        )
    sequence = char_sequence(chars)
    ignore = frozenset(ignore_columns)
    glyphs: List[GlyphDescriptor] = []

    x0 = 0
    for index, char in enumerate(sequence):
        gutter = _find_gutter(buffer, x0, ignore, background)
        if gutter is None:
            if strict:
                raise SegmentationExhausted(char, index, x0)
            logger.warning(
                "strip exhausted at x=%d: %d of %d characters left without a glyph (first %r)",
                x0,
                len(sequence) - index,
                len(sequence),
                char,
            )
            break
        width = gutter - x0
        if char in charset:
            glyphs.append(GlyphDescriptor(id=ord(char), source_x=x0, width=width, height=buffer.height))
            logger.debug("glyph %r at x=%d width=%d", char, x0, width)
        else:
            logger.debug("skipping %r at x=%d width=%d (not in charset)", char, x0, width)
        x0 = gutter + 1

    if SPACE in charset and SPACE not in sequence:
        space = synthesize_space(glyphs, buffer.height)
        if space is not None:
            glyphs.append(space)
    return glyphs


def synthesize_space(glyphs: List[GlyphDescriptor], height: int) -> Optional[GlyphDescriptor]:
    """Build a space glyph as wide as the rounded mean of ``glyphs``."""
    if not glyphs:
        logger.warning("no glyphs to average, space not synthesized")
        return None
    width = js_round(sum(glyph.width for glyph in glyphs) / len(glyphs))
    return GlyphDescriptor(id=ord(SPACE), source_x=SYNTHETIC_SOURCE_X, width=width, height=height)
