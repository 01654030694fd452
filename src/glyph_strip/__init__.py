"""Turn glyph strip images into packed bitmap-font atlases with BMFont metrics."""

from .build import FontBuild, build_font
from .config import BuildOptions
from .errors import ConfigurationError, GeometryError, GlyphStripError, SegmentationExhausted
from .metrics import CharMetrics, FontMetrics, emit
from .pixels import PixelBuffer
from .repack import PackResult, repack
from .segment import GlyphDescriptor, segment

__all__ = [
    "BuildOptions",
    "CharMetrics",
    "ConfigurationError",
    "FontBuild",
    "FontMetrics",
    "GeometryError",
    "GlyphDescriptor",
    "GlyphStripError",
    "PackResult",
    "PixelBuffer",
    "SegmentationExhausted",
    "build_font",
    "emit",
    "repack",
    "segment",
]
