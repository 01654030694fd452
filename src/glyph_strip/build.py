"""End-to-end build: glyph strip image in, packed texture and font data out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import List, Optional, Union

from . import codec
from .bmfont import FORMATS
from .cache import BuildCache, fingerprint
from .config import BuildOptions
from .errors import ConfigurationError
from .metrics import FontMetrics, emit
from .naming import interpolate_name
from .repack import ensure_packable, repack
from .segment import segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FontBuild:
    texture: bytes
    texture_name: str
    font_data: str
    font_data_name: str
    metrics: FontMetrics

    def write(self, output_dir: Path) -> List[Path]:
        output_dir.mkdir(parents=True, exist_ok=True)
        texture_path = output_dir / self.texture_name
        font_data_path = output_dir / self.font_data_name
        texture_path.write_bytes(self.texture)
        font_data_path.write_text(self.font_data, encoding="utf-8")
        return [texture_path, font_data_path]


def build_font(
    source: Union[bytes, Path],
    resource_name: Optional[str] = None,
    options: Optional[BuildOptions] = None,
    cache: Optional[BuildCache] = None,
) -> FontBuild:
    """Segment, repack and describe the glyph strip in ``source``.

    ``resource_name`` provides ``[name]`` for output names and the font face; it
    defaults to the file name when ``source`` is a path.  With a ``cache``, each
    fingerprint of the input bytes and options is built at most once.
    """
    options = (options or BuildOptions()).validate()
    if isinstance(source, Path):
        resource_name = resource_name or source.name
        data = source.read_bytes()
    else:
        data = source
    if not resource_name:
        raise ConfigurationError("resource_name is required when building from bytes")

    if cache is None:
        return _build(data, resource_name, options)
    key = fingerprint(data, resource_name, options.cache_key())
    return cache.get_or_compute(key, lambda: _build(data, resource_name, options))


def _build(data: bytes, resource_name: str, options: BuildOptions) -> FontBuild:
    buffer = codec.decode(data)
    logger.info("segmenting %s (%dx%d)", resource_name, buffer.width, buffer.height)

    glyphs = segment(
        buffer,
        options.sequence,
        options.retained,
        options.ignore_columns,
        strict=options.strict,
    )
    if not glyphs:
        raise ConfigurationError(f"no glyph of the charset was found in {resource_name}")

    packed = ensure_packable(repack(buffer, glyphs))
    texture = codec.encode(packed.buffer, options.image_format)
    texture_name = interpolate_name(options.name, resource_name, texture)

    metrics = emit(
        face=PurePosixPath(resource_name).stem,
        line_height=buffer.height,
        source_width=buffer.width,
        glyphs=packed.glyphs,
        texture=texture_name,
    )
    font_data = FORMATS[options.data_format](metrics)
    font_data_name = interpolate_name(
        options.data_name_template, resource_name, font_data.encode("utf-8")
    )
    logger.info("%s: %d glyphs packed into %s", resource_name, metrics.count, texture_name)

    return FontBuild(
        texture=texture,
        texture_name=texture_name,
        font_data=font_data,
        font_data_name=font_data_name,
        metrics=metrics,
    )
