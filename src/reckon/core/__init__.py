"""
reckon core: lexer, tree builder, operand tree, configuration, and errors.

Usage:
    from reckon.core import parse, tokenize

    tree = parse(tokenize("10 - 11 + 2"))
    # tree.value() == 1
"""

from reckon.core.config import InterpreterConfig, UnknownCharPolicy, load_config
from reckon.core.lexer import Token, TokenKind, tokenize
from reckon.core.parser import evaluate, parse

__all__ = [
    "InterpreterConfig",
    "Token",
    "TokenKind",
    "UnknownCharPolicy",
    "evaluate",
    "load_config",
    "parse",
    "tokenize",
]
