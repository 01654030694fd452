"""Font metrics describing a packed atlas, ready for serialization."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Sequence, Tuple

from .segment import GlyphDescriptor


@dataclass(frozen=True)
class CharMetrics:
    id: int
    x: int
    y: int
    width: int
    height: int
    xoffset: int
    yoffset: int
    xadvance: int
    page: int


@dataclass(frozen=True)
class FontMetrics:
    face: str
    size: int
    line_height: int
    base: int
    scale_w: int
    scale_h: int
    texture: str
    chars: Tuple[CharMetrics, ...]

    @property
    def pages(self) -> int:
        return 1

    @property
    def count(self) -> int:
        return len(self.chars)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["chars"] = [asdict(char) for char in self.chars]
        data["pages"] = self.pages
        return data


def emit(
    face: str,
    line_height: int,
    source_width: int,
    glyphs: Sequence[GlyphDescriptor],
    texture: str,
) -> FontMetrics:
    chars = []
    for glyph in glyphs:
        if glyph.packed_x is None:
            raise ValueError(f"glyph {glyph.char!r} has not been packed")
        chars.append(
            CharMetrics(
                id=glyph.id,
                x=glyph.packed_x,
                y=0,
                width=glyph.width,
                height=line_height,
                xoffset=0,
                yoffset=0,
                xadvance=glyph.width + 1,
                page=0,
            )
        )
    return FontMetrics(
        face=face,
        size=line_height,
        line_height=line_height,
        base=line_height,
        scale_w=source_width,
        scale_h=line_height,
        texture=texture,
        chars=tuple(chars),
    )
