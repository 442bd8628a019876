"""
Interpreter configuration.

Configuration is an immutable value built by the caller and passed to
``tokenize`` / ``parse`` explicitly. It can be loaded from a
``reckon.toml`` file:

    [lexer]
    unknown_characters = "error"   # or "skip"

    [integers]
    bits = 64                      # signed width; 0 = unbounded
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from reckon.core.errors import ConfigError, IntegerOverflowError

CONFIG_FILENAME = "reckon.toml"
DEFAULT_BITS = 64


class UnknownCharPolicy(StrEnum):
    """What the lexer does with characters that are not digits, operators, or whitespace."""

    ERROR = "error"
    SKIP = "skip"


@dataclass(frozen=True)
class InterpreterConfig:
    """Settings shared by the lexer and the tree builder."""

    unknown_characters: UnknownCharPolicy = UnknownCharPolicy.ERROR
    # 0 disables width checks; literals stay capped by sys.get_int_max_str_digits()
    bits: int = DEFAULT_BITS

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int) or self.bits < 0:
            raise ConfigError(f"Integer width must be a non-negative integer, got {self.bits!r}")
        if self.bits == 1:
            raise ConfigError("Integer width must be at least 2 bits")

    @property
    def min_value(self) -> int | None:
        return -(1 << (self.bits - 1)) if self.bits else None

    @property
    def max_value(self) -> int | None:
        return (1 << (self.bits - 1)) - 1 if self.bits else None

    def check_range(self, value: int, position: int | None = None) -> int:
        """Return value unchanged, or raise if it leaves the signed range."""
        if not self.bits:
            return value
        limit = 1 << (self.bits - 1)
        if not -limit <= value < limit:
            raise IntegerOverflowError(value, self.bits, position)
        return value


DEFAULT_CONFIG = InterpreterConfig()


def load_config(path: Path) -> InterpreterConfig:
    """Load an ``InterpreterConfig`` from a TOML file.

    Missing sections and keys fall back to the defaults.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    lexer = _section(data, "lexer", path)
    integers = _section(data, "integers", path)

    policy = lexer.get("unknown_characters", UnknownCharPolicy.ERROR.value)
    try:
        unknown_characters = UnknownCharPolicy(policy)
    except ValueError as e:
        choices = ", ".join(p.value for p in UnknownCharPolicy)
        raise ConfigError(
            f"Invalid lexer.unknown_characters {policy!r} in {path} (expected one of: {choices})"
        ) from e

    return InterpreterConfig(
        unknown_characters=unknown_characters,
        bits=integers.get("bits", DEFAULT_BITS),
    )


def _section(data: dict, name: str, path: Path) -> dict:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] in {path} must be a table")
    return section


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``reckon.toml`` in start or its parents, if any."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
