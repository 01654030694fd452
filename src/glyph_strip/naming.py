"""Content-addressed output names such as ``[name].[hash:8].png``."""

from __future__ import annotations

import hashlib
import re
from pathlib import PurePosixPath

PLACEHOLDER_RE = re.compile(r"\[(name|ext|hash|contenthash)(?::(\d+))?\]")


def content_hash(content: bytes, length: int | None = None) -> str:
    digest = hashlib.md5(content).hexdigest()
    return digest[:length] if length else digest


def interpolate_name(template: str, resource_name: str, content: bytes) -> str:
    path = PurePosixPath(resource_name)

    def substitute(match: re.Match) -> str:
        key, length = match.group(1), match.group(2)
        if key == "name":
            return path.stem
        if key == "ext":
            return path.suffix.lstrip(".")
        return content_hash(content, int(length) if length else None)

    return PLACEHOLDER_RE.sub(substitute, template)
