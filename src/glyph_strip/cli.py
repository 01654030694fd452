"""CLI entry point: build a bitmap font from a glyph strip image."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .build import build_font
from .config import BuildOptions
from .errors import GlyphStripError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Repack a glyph strip into a texture atlas and write BMFont metrics."
    )
    parser.add_argument("image", help="Path to the glyph strip image.")
    parser.add_argument(
        "--output-dir",
        required=True,
        help="Directory to write the packed texture and font data.",
    )
    parser.add_argument("--chars", help="Characters in the strip, left to right.")
    parser.add_argument("--charset", help="Characters to keep (default: chars plus space).")
    parser.add_argument(
        "--ignore-columns",
        help="Comma-separated column indices never treated as gutters.",
    )
    parser.add_argument("--name", help="Texture file name template, e.g. [name].[hash:8].png.")
    parser.add_argument("--data-name", help="Font data file name template.")
    parser.add_argument(
        "--format",
        dest="data_format",
        choices=["xml", "fnt"],
        help="Font data format.",
    )
    parser.add_argument(
        "--image-format",
        choices=["png", "webp"],
        help="Texture image format.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when the strip has fewer glyphs than declared characters.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run a build from CLI arguments and print a JSON summary."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    image_path = Path(args.image).expanduser().resolve()
    output_dir = Path(args.output_dir).expanduser().resolve()
    try:
        options = BuildOptions.from_env(
            chars=args.chars,
            charset=args.charset,
            ignore_columns=args.ignore_columns,
            name=args.name,
            data_name=args.data_name,
            data_format=args.data_format,
            image_format=args.image_format,
            strict=args.strict,
        )
        result = build_font(image_path, options=options)
        texture_path, font_data_path = result.write(output_dir)
    except GlyphStripError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    summary = {
        "face": result.metrics.face,
        "texture": str(texture_path),
        "font_data": str(font_data_path),
        "glyphs": result.metrics.count,
        "line_height": result.metrics.line_height,
    }
    print(json.dumps(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
