"""
Lexer for reckon arithmetic expressions.

Converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

import logging
from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict

from reckon.core.config import DEFAULT_CONFIG, InterpreterConfig, UnknownCharPolicy
from reckon.core.errors import LexError

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    INTEGER = auto()
    PLUS = auto()
    MINUS = auto()


class Token(BaseModel):
    """A single token from the lexer."""

    kind: TokenKind
    text: str
    pos: int = 0

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, pos={self.pos})"


_OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
}


def tokenize(text: str, config: InterpreterConfig | None = None) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Digit runs become INTEGER tokens, ``+`` and ``-`` become operator
    tokens, and whitespace only ends a digit run. Any other character is
    handled according to ``config.unknown_characters``.

    Raises:
        LexError: On an unknown character under the strict policy.
    """
    config = config or DEFAULT_CONFIG
    tokens: list[Token] = []
    digits: list[str] = []
    start = 0

    def flush() -> None:
        if digits:
            tokens.append(Token(kind=TokenKind.INTEGER, text="".join(digits), pos=start))
            digits.clear()

    for i, c in enumerate(text):
        if c in _DIGITS:
            if not digits:
                start = i
            digits.append(c)
            continue

        flush()

        if c in _OPERATORS:
            tokens.append(Token(kind=_OPERATORS[c], text=c, pos=i))
            continue

        if c.isspace():
            continue

        if config.unknown_characters == UnknownCharPolicy.ERROR:
            raise LexError(c, i)
        logger.debug("Skipping unknown character %r at offset %d", c, i)

    # Trailing digit run
    flush()

    return tokens
