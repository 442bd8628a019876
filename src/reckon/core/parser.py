"""
Tree builder for reckon arithmetic expressions.

Folds a token sequence into a left-associative operand tree:

    expression → INTEGER (("+" | "-") INTEGER)*

Only one binary operation is open at a time. When an operator arrives
while the open operation already has both operands, that operation is
collapsed into a Literal of its value, which becomes the left operand of
the next operation. ``1 - 2 + 3`` therefore evaluates as ``(1 - 2) + 3``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from reckon.core.config import DEFAULT_CONFIG, InterpreterConfig
from reckon.core.errors import IntegerOverflowError, ParseError
from reckon.core.ir import BinaryOperation, Literal, Operand, Operation
from reckon.core.lexer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

_OPERATIONS: dict[TokenKind, Operation] = {
    TokenKind.PLUS: Operation.ADDITION,
    TokenKind.MINUS: Operation.SUBTRACTION,
}


class _TreeBuilder:
    """Holds the single open binary operation while tokens are folded in."""

    def __init__(self, config: InterpreterConfig) -> None:
        self.config = config
        self.op = Operation.NONE
        self.op_pos = 0
        self.left: Operand | None = None
        self.right: Operand | None = None

    def feed(self, token: Token) -> None:
        if token.kind == TokenKind.INTEGER:
            self._add_operand(token)
        elif token.kind in _OPERATIONS:
            self._add_operator(token)
        else:
            raise ParseError(f"Unexpected token: {token.kind} ({token.text!r})", token.pos)

    def _add_operand(self, token: Token) -> None:
        literal = Literal(self._to_int(token))
        if self.left is None:
            self.left = literal
            return
        if self.op == Operation.NONE or self.right is not None:
            raise ParseError(f"Expected an operator before {token.text!r}", token.pos)
        self.right = literal

    def _add_operator(self, token: Token) -> None:
        if self.left is None:
            raise ParseError(f"Expected an integer before {token.text!r}", token.pos)
        if self.op != Operation.NONE and self.right is None:
            raise ParseError(f"Expected an integer between operators, got {token.text!r}", token.pos)
        if self.right is not None:
            self.left = self._collapse(self.left, self.right, token.pos)
        self.op = _OPERATIONS[token.kind]
        self.op_pos = token.pos

    def _to_int(self, token: Token) -> int:
        """Convert a digit run, bounding its length before calling int()."""
        if not (token.text.isascii() and token.text.isdigit()):
            raise ParseError(f"Invalid integer literal {token.text!r}", token.pos)
        digits = token.text.lstrip("0") or "0"
        max_value = self.config.max_value
        if max_value is not None and len(digits) > len(str(max_value)):
            raise IntegerOverflowError(digits, self.config.bits, token.pos)
        try:
            value = int(digits)
        except ValueError as e:
            # Beyond sys.get_int_max_str_digits(), even when unbounded
            raise IntegerOverflowError(digits, self.config.bits, token.pos) from e
        return self.config.check_range(value, token.pos)

    def _collapse(self, left: Operand, right: Operand, pos: int) -> Literal:
        """Reduce the completed operation to a Literal of its value."""
        current = BinaryOperation(op=self.op, left=left, right=right)
        collapsed = Literal(self.config.check_range(current.value(), pos))
        logger.debug("Collapsed %s into %s", current, collapsed)
        self.op = Operation.NONE
        self.right = None
        return collapsed

    def finish(self) -> Operand:
        if self.left is None:
            raise ParseError("Empty expression")
        if self.op == Operation.NONE:
            return self.left
        if self.right is None:
            raise ParseError(f"Expected an integer after {self.op.value!r}", self.op_pos)
        root = BinaryOperation(op=self.op, left=self.left, right=self.right)
        self.config.check_range(root.value(), self.op_pos)
        return root


def parse(tokens: Sequence[Token], config: InterpreterConfig | None = None) -> Operand:
    """Build an operand tree from a token sequence.

    Args:
        tokens: Tokens produced by ``tokenize``.
        config: Interpreter settings; the integer width bounds every
            literal and every intermediate result.

    Returns:
        The root operand. A bare Literal when no operator was seen.

    Raises:
        ParseError: If the tokens do not form an expression.
        IntegerOverflowError: If a value leaves the configured width.
    """
    builder = _TreeBuilder(config or DEFAULT_CONFIG)
    for token in tokens:
        builder.feed(token)
    return builder.finish()


def evaluate(source: str, config: InterpreterConfig | None = None) -> int:
    """Tokenize, parse, and evaluate an expression string.

    Raises:
        LexError: If tokenization fails.
        ParseError: If the expression is malformed.
        IntegerOverflowError: If a value leaves the configured width.
    """
    return parse(tokenize(source, config), config).value()
