"""
Error types for reckon lexing, parsing, evaluation, and configuration.
"""


class ReckonError(Exception):
    """Base exception for all reckon errors."""

    def __init__(self, message: str, position: int | None = None):
        self.message = message
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the source offset if available."""
        if self.position is not None:
            return f"{self.message} (at offset {self.position})"
        return self.message


class LexError(ReckonError):
    """
    Raised when the lexer meets a character it does not recognize.

    Only raised under the strict unknown-character policy; the lenient
    policy skips such characters instead.
    """

    def __init__(self, character: str, position: int):
        self.character = character
        super().__init__(f"Unexpected character: {character!r}", position)


class ParseError(ReckonError):
    """
    Raised when a token sequence does not form a valid expression.

    Examples:
    - Empty token sequence
    - Leading operator
    - Two operators in a row
    - Trailing operator
    - Two integers with no operator between them
    """

    pass


class IntegerOverflowError(ReckonError, OverflowError):
    """
    Raised when a literal or intermediate result leaves the configured
    signed integer range.

    ``value`` is the digit text instead of an int when the literal was
    rejected before conversion.
    """

    def __init__(self, value: int | str, bits: int, position: int | None = None):
        self.value = value
        self.bits = bits
        shown = str(value) if isinstance(value, int) else value
        if len(shown) > 24:
            shown = f"{shown[:8]}...{shown[-4:]} ({len(shown)} digits)"
        limit = f"{bits} signed bits" if bits else "the interpreter's integer conversion limit"
        super().__init__(f"Integer {shown} does not fit in {limit}", position)


class ConfigError(ReckonError):
    """
    Raised when configuration cannot be loaded.

    Examples:
    - Unreadable or malformed reckon.toml
    - Unknown unknown-character policy
    - Negative or non-integer width
    """

    pass
