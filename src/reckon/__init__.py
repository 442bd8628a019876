"""
reckon - a small left-to-right integer expression interpreter.

Tokenizes strings such as ``"10 - 11 + 2"``, folds the tokens into a
left-associative operand tree, and evaluates it.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.config import InterpreterConfig, UnknownCharPolicy, load_config
from .core.errors import ConfigError, IntegerOverflowError, LexError, ParseError, ReckonError
from .core.ir import BinaryOperation, Literal, Operand, Operation
from .core.lexer import Token, TokenKind, tokenize
from .core.parser import evaluate, parse

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    # Pipeline
    "tokenize",
    "parse",
    "evaluate",
    # Types
    "Token",
    "TokenKind",
    "Operand",
    "Literal",
    "BinaryOperation",
    "Operation",
    # Configuration
    "InterpreterConfig",
    "UnknownCharPolicy",
    "load_config",
    # Errors
    "ReckonError",
    "LexError",
    "ParseError",
    "IntegerOverflowError",
    "ConfigError",
]
