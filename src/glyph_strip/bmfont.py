"""AngelCode BMFont serializers for :class:`FontMetrics`."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Callable, Dict

from .metrics import CharMetrics, FontMetrics

XML_DECLARATION = '<?xml version="1.0"?>\n'

CHAR_FIELDS = ("id", "x", "y", "width", "height", "xoffset", "yoffset", "xadvance", "page")


def _attrs(**values) -> Dict[str, str]:
    return {key: str(value) for key, value in values.items()}


def _char_attrs(char: CharMetrics) -> Dict[str, str]:
    return {field: str(getattr(char, field)) for field in CHAR_FIELDS}


def to_xml(metrics: FontMetrics) -> str:
    root = ET.Element("font")
    ET.SubElement(root, "info", _attrs(face=metrics.face, size=metrics.size))
    ET.SubElement(
        root,
        "common",
        _attrs(
            lineHeight=metrics.line_height,
            base=metrics.base,
            scaleW=metrics.scale_w,
            scaleH=metrics.scale_h,
            pages=metrics.pages,
        ),
    )
    pages = ET.SubElement(root, "pages")
    ET.SubElement(pages, "page", _attrs(id=0, file=metrics.texture))
    chars = ET.SubElement(root, "chars", _attrs(count=metrics.count))
    for char in metrics.chars:
        ET.SubElement(chars, "char", _char_attrs(char))
    ET.indent(root, space="  ")
    return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def _quote(value: str) -> str:
    return '"' + value.replace('"', "'") + '"'


def to_text(metrics: FontMetrics) -> str:
    lines = [
        f"info face={_quote(metrics.face)} size={metrics.size}",
        (
            f"common lineHeight={metrics.line_height} base={metrics.base} "
            f"scaleW={metrics.scale_w} scaleH={metrics.scale_h} pages={metrics.pages}"
        ),
        f"page id=0 file={_quote(metrics.texture)}",
        f"chars count={metrics.count}",
    ]
    for char in metrics.chars:
        lines.append("char " + " ".join(f"{field}={getattr(char, field)}" for field in CHAR_FIELDS))
    return "\n".join(lines) + "\n"


FORMATS: Dict[str, Callable[[FontMetrics], str]] = {
    "xml": to_xml,
    "fnt": to_text,
}
