"""Build options, with defaults overridable from the environment or a ``.env`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, Iterable, Optional, Tuple

from dotenv import load_dotenv

from .bmfont import FORMATS
from .charset import DEFAULT_CHARS, char_sequence, default_charset
from .codec import IMAGE_FORMATS
from .errors import ConfigurationError

ENV_PREFIX = "GLYPH_STRIP_"


def parse_columns(value: Any) -> FrozenSet[int]:
    """Accept ``"3,7"``, an iterable of ints or numeric strings, or ``None``."""
    if value is None:
        return frozenset()
    if isinstance(value, str):
        value = [part for part in value.replace(" ", "").split(",") if part]
    columns = set()
    for item in value:
        if isinstance(item, bool):
            raise ConfigurationError(f"ignore column must be an integer, got {item!r}")
        try:
            column = int(item)
        except (TypeError, ValueError):
            raise ConfigurationError(f"ignore column must be an integer, got {item!r}") from None
        if isinstance(item, float) and column != item:
            raise ConfigurationError(f"ignore column must be an integer, got {item!r}")
        if column < 0:
            raise ConfigurationError(f"ignore column must not be negative, got {column}")
        columns.add(column)
    return frozenset(columns)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class BuildOptions:
    chars: str = DEFAULT_CHARS
    charset: Optional[FrozenSet[str]] = None
    ignore_columns: FrozenSet[int] = field(default_factory=frozenset)
    name: str = "[name].[hash:8].png"
    data_name: Optional[str] = None
    data_format: str = "xml"
    image_format: str = "png"
    strict: bool = False

    @classmethod
    def create(
        cls,
        chars: Optional[Iterable[str]] = None,
        charset: Optional[Iterable[str]] = None,
        ignore_columns: Any = None,
        **kwargs: Any,
    ) -> "BuildOptions":
        """Normalize loosely typed option values (strings, lists) into a BuildOptions."""
        return cls(
            chars="".join(char_sequence(chars)) if chars is not None else DEFAULT_CHARS,
            charset=frozenset(char_sequence(charset)) if charset is not None else None,
            ignore_columns=parse_columns(ignore_columns),
            **kwargs,
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "BuildOptions":
        """Read ``GLYPH_STRIP_*`` variables, then apply non-None ``overrides``."""
        load_dotenv()
        values: dict = {}
        env = {key[len(ENV_PREFIX):].lower(): value
               for key, value in os.environ.items() if key.startswith(ENV_PREFIX)}
        for key in ("chars", "charset", "ignore_columns", "name", "data_name",
                    "data_format", "image_format"):
            if key in env:
                values[key] = env[key]
        if "strict" in env:
            values["strict"] = _parse_bool(env["strict"])
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls.create(**values)

    @property
    def sequence(self) -> Tuple[str, ...]:
        return tuple(char_sequence(self.chars))

    @property
    def data_name_template(self) -> str:
        """``data_name``, or ``[name].[hash:8].<data_format>`` when unset."""
        if self.data_name is not None:
            return self.data_name
        return f"[name].[hash:8].{self.data_format}"

    @property
    def retained(self) -> FrozenSet[str]:
        return self.charset if self.charset is not None else default_charset(self.chars)

    def validate(self) -> "BuildOptions":
        """Check the options and return a copy with ignore columns normalized to ints."""
        ignore_columns = parse_columns(self.ignore_columns)
        if self.data_format not in FORMATS:
            raise ConfigurationError(
                f"unknown font data format {self.data_format!r}, expected one of {sorted(FORMATS)}"
            )
        if self.image_format not in IMAGE_FORMATS:
            raise ConfigurationError(
                f"unknown image format {self.image_format!r}, expected one of {sorted(IMAGE_FORMATS)}"
            )
        sequence = set(self.sequence)
        if not sequence:
            raise ConfigurationError("chars must declare at least one character")
        if not self.retained & sequence:
            raise ConfigurationError(
                "charset shares no character with chars, no glyph would be retained"
            )
        return replace(self, ignore_columns=ignore_columns)

    def cache_key(self) -> Tuple[Any, ...]:
        return (
            self.chars,
            "".join(sorted(self.retained)),
            tuple(sorted(self.ignore_columns)),
            self.name,
            self.data_name_template,
            self.data_format,
            self.image_format,
            self.strict,
        )
