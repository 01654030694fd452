"""Character sequence helpers shared by the segmenter and the option layer."""

from __future__ import annotations

import math
from typing import FrozenSet, Iterable, List

DEFAULT_CHARS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    ".,;:?!-_~#\"'&()[]|`/\\@°+=*%€$£¢<>©®"
)
SPACE = " "


def char_sequence(chars: Iterable[str]) -> List[str]:
    """Split a string (or any iterable of strings) into single code points."""
    return [ch for item in chars for ch in item]


def default_charset(chars: Iterable[str]) -> FrozenSet[str]:
    return frozenset(char_sequence(chars)) | {SPACE}


def js_round(value: float) -> int:
    # half-up, so 2.5 -> 3 rather than Python's 2
    return int(math.floor(value + 0.5))
